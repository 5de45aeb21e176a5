""" Command line interface. """
