import importlib.metadata

try:
    VERSION = importlib.metadata.version("novatel-decoder")
except importlib.metadata.PackageNotFoundError:
    # Not installed, e.g. running tests straight from a checkout
    VERSION = "0.0.0-dev"
