from setuptools import setup, find_packages

setup(
    name="youtube_transcripts",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "aiohttp>=3.8.0",
        "beautifulsoup4>=4.12.0",
        "defusedxml>=0.7.1",
        "colorlog>=6.7.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
        ],
    },
    python_requires=">=3.8",
    description="Retrieve YouTube transcripts, including auto-generated captions, through the internal player API",
)
