"""Core domain package for craftref.

Core contains the catalog synchronization, history and filtering logic without
any HTTP, storage or UI specific code, keeping the browser logic portable.
"""
