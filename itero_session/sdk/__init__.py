"""
SDK - Session state, change notification and request augmentation.
"""
