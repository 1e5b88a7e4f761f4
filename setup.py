from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="unccrypto",
        version="0.3.0",
        description="Multi-algorithm identity keys and signatures (Ed25519, secp256k1, RSA-2048)",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=[
            "base58>=2.1",
            "cryptography>=41.0",
            "coincurve>=18.0",
            "pycryptodome>=3.19",
            "rsa>=4.7",
        ],
        extras_require={
            "test": [
                "hypothesis>=6.0",
                "pytest>=7.4",
            ],
        },
    )
