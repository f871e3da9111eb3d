[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "otpkeeper"
version = "0.1.0"
description = "Account records, input validation, locking and settings logic for a TOTP/HOTP authenticator"
requires-python = ">=3.10"
keywords = ["otp", "totp", "hotp", "two-factor", "authenticator"]
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
    "Topic :: Security",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["otpkeeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
