"""NJ TRANSIT departures and previous-stop status reports."""

__version__ = "0.1.0"
