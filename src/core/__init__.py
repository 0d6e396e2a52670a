"""Core domain package for notifeed.

Core contains visibility, ordering, muting and payload logic without any
storage, localization or desktop-specific code, keeping the curation rules
portable.
"""
