#!/usr/bin/env python

from setuptools import setup

setup(
    name="estemplate",
    version="0.1.0",
    description="Elasticsearch index templates as pydantic models, with a deterministic JSON codec",
    packages=["estemplate"],
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.10",
    keywords=["elasticsearch", "template", "mapping"],
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Topic :: Database",
    ],
    install_requires=[
        "pydantic>=2.11",
        "pydantic-settings",
        "python-dotenv",
        "typing_extensions",
    ],
    extras_require={
        'test': ['pytest'],
        'dev': [
            'pytest',
            'mypy',
            'flake8',
        ]
    },
)
