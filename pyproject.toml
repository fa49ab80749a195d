[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zonekit"
version = "0.2.0"
description = "Validation of DNS resource record data in wire format, with a registry of record types and classes"
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "zone", "rdata", "resource-record", "base32hex", "dnssec"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zonekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
