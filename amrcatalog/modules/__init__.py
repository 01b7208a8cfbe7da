"""Modules of the AMR catalogue: the enumeration and its serialization adapters."""
