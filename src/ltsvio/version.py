from importlib.metadata import PackageNotFoundError, version

try:
    version = version("LtsvIO")
except PackageNotFoundError:
    version = "0.0.0"
