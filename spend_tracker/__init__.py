"""Transaction table and monthly budget views for a personal-finance tracker."""

__version__ = "0.1.0"
