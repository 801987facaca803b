[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookstorepp"
version = "0.1.0"
description = "A small file-backed bookstore: stock administration and a shopping cart with purchases"
requires-python = ">=3.10"
dependencies = []
keywords = ["bookstore", "inventory", "stock", "shopping-cart", "point-of-sale"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bookstore-admin = "bookstorepp.admin_cli:main"
bookstore-cart = "bookstorepp.cart_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bookstorepp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
