"""spine-fp command line interface (``spine-fp``)."""
