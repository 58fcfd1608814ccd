"""
Services package
Deadline derivation, display classes, persistence and use cases
"""
