""" Helper utilities """
