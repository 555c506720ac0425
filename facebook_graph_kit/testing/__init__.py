"""
Facebook Graph Testing Utilities

Provides mock data generators and a recording client for contract tests.
"""

from .mocks import (
    generate_mock_user,
    generate_mock_audience,
    generate_mock_add_users_result,
    generate_mock_dataset,
    MockGraphClient,
    RecordedCall,
)

__all__ = [
    "generate_mock_user",
    "generate_mock_audience",
    "generate_mock_add_users_result",
    "generate_mock_dataset",
    "MockGraphClient",
    "RecordedCall",
]
