from setuptools import setup, find_packages

setup(
    name="eleven-client",
    version="0.1.0",
    description="ElevenLabs API client with retrying transport and voice slot management",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "requests>=2.31.0",
        "python-dotenv>=1.0.0",
        "blessed>=1.20.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
