[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sealbox"
version = "0.1.0"
description = "Serialize Python values to CBOR and seal them with XChaCha20-Poly1305 shared-key encryption"
requires-python = ">=3.10"
keywords = ["encryption", "xchacha20", "poly1305", "cbor", "serialization", "aead"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pycryptodome>=3.10",
    "cbor2>=5.4",
]

[project.optional-dependencies]
test = ["pytest>=7"]

[tool.hatch.build.targets.wheel]
packages = ["sealbox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
