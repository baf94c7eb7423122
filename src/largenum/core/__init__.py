"""
Core domain models, number formatting, and input contracts.

This module contains the building blocks that are independent of any host
(editor, game loop, UI): the BigValue type, the magnitude formatter and the
validators for text input and serialized values.
"""
