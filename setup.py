# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="podproject",
    version="0.1.0",
    description="In-memory Pods project model: pod groups, deduplicated file references and localized variant groups",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["podproject", "podproject.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'podproject=podproject.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
