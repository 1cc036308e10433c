from setuptools import setup, find_packages

setup(
    name="sitesearch",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"sitesearch.web": ["templates/*.html"]},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0.0",
        "httpx",
        "tenacity",
        "beautifulsoup4",
        "fastapi",
        "uvicorn",
        "jinja2",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "sitesearch=sitesearch.cli:main",
        ],
    },
)
