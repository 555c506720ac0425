"""
Facebook Conversions API Operations

Datasets (pixels) and server-side event upload.
"""

from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from ..models import Params, Result
from ..utils import validate_ad_account_id, validate_object_id

if TYPE_CHECKING:
    from ..client import FacebookGraphClient

logger = logging.getLogger("facebook.operations.conversions")


async def dataset(
    client: "FacebookGraphClient",
    dataset_id: str,
    params: Optional[Params] = None,
) -> Result:
    dataset_id = validate_object_id("dataset_id", dataset_id)
    return await client.get(dataset_id, params=params)


async def datasets(
    client: "FacebookGraphClient",
    ad_account_id: str,
    params: Optional[Params] = None,
) -> Result:
    ad_account_id = validate_ad_account_id(ad_account_id)
    return await client.get(f"{ad_account_id}/adspixels", params=params)


async def upload_events(
    client: "FacebookGraphClient",
    dataset_id: str,
    params: Optional[Params] = None,
) -> Result:
    """
    Send server events to a dataset.

    Args:
        client: Authenticated Graph client
        dataset_id: Dataset (pixel) ID
        params: Request params; "data" holds the list of events and is JSON
            encoded on the wire, "test_event_code" routes them to the test tool

    Returns:
        Decoded response, e.g. {"events_received": 1, "fbtrace_id": "..."}
    """
    dataset_id = validate_object_id("dataset_id", dataset_id)
    result = await client.post(f"{dataset_id}/events", params=params)
    logger.debug(f"Dataset {dataset_id} received {result.get('events_received', 0)} events")
    return result
