"""
Request and response models.
"""
