from setuptools import setup, find_packages

setup(
    name="sigverify",
    version="1.0",
    description="secp256k1 ECDSA signature verification and public key recovery on top of libsecp256k1",
    packages=find_packages(exclude=["test", "test.*"]),
    python_requires=">=3.7",
    install_requires=[
        "coincurve>=18.0.0"
    ],
    extras_require={
        "test": ["pytest"]
    }
)
