"""
genderapi - Python client for the GenderAPI.io gender inference service
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="genderapi",
    version="1.0.0",
    author="GenderAPI",
    author_email="support@genderapi.io",
    description="Async Python client for the GenderAPI.io gender inference API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/GenderAPI/genderapi-python",
    packages=find_packages(include=["genderapi", "genderapi.*"]),
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
)
