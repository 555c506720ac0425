from setuptools import setup, find_packages

setup(
    name="facebook-graph-kit",
    version="0.1.0",
    packages=find_packages(include=["facebook_graph_kit", "facebook_graph_kit.*"]),
    install_requires=[
        "httpx",
        "pydantic",
        "requests-oauthlib",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-asyncio",
            "respx",
        ]
    },
    author="",
    author_email="",
    description="Client kit for the Facebook Graph API",
    long_description="Asyncio client for the Facebook Graph API, including OAuth2, custom audiences, conversions and account lookups",
    long_description_content_type="text/markdown",
    url="",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
