from setuptools import setup, find_packages

setup(
    name="tweet_service",
    version="1.0.0",
    packages=find_packages(include=["tweet_service", "tweet_service.*"]),
    install_requires=[
        "fastapi>=0.100.0",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "python-dotenv>=0.19.0",
        "python-multipart>=0.0.6",
        "tweepy>=4.10.0",
        "uvicorn>=0.15.0",
    ],
    extras_require={
        "test": [
            "httpx>=0.24.0",
            "pytest>=7.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    python_requires=">=3.8",
    description="Publishes tweets with optional media using caller-supplied Twitter credentials",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
