[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mceliece"
version = "0.1.0"
description = "Classic McEliece 348864 key encapsulation mechanism with a deterministic known-answer test generator"
requires-python = ">=3.10"
keywords = ["mceliece", "kem", "post-quantum", "goppa", "niederreiter", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mceliece-kat = "mceliece.kat:main"

[tool.hatch.build.targets.wheel]
packages = ["mceliece"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
