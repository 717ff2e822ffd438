"""End-to-end tests of the ``littleutils`` command line."""
