"""1DEX weighted pool quoter - Python implementation."""

from quoter.amm import OneIntroAmm, amm_factory

__version__ = "0.1.0"
__all__ = ["OneIntroAmm", "amm_factory", "__version__"]
