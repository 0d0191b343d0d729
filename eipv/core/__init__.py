"""
core package
------------
Infrastructure shared by every eipv component: exceptions, logging,
paths and CLI helpers.
"""
