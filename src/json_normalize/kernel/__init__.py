"""Canonicalization kernel: literal encoding, replacer gate, container walk and drivers."""
