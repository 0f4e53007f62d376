# setup.py
from setuptools import setup, find_packages

setup(
    name="spendtrack",
    version="0.1.0",
    description="Sorted, paginated transaction views and monthly budget progress for a personal-finance tracker",
    author="Your Name",
    author_email="you@example.com",
    url="https://github.com/yourusername/spendtrack",
    packages=find_packages(include=["spend_tracker", "spend_tracker.*"]),
    python_requires=">=3.9",
    install_requires=[
        "click>=7.0",
        "pyyaml>=5.3",
        "pandas>=1.1",
        "python-dotenv>=0.19",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "spendtrack=spend_tracker.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
