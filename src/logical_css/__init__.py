"""
Logical CSS Conversion Package

Converts physical (top/right/bottom/left) CSS declarations into their
writing-mode-independent logical equivalents.

ARCHITECTURAL GUARANTEE:
------------------------
The conversion engine (properties, tokenizer, shorthand, transformer)
contains ZERO knowledge of:
    - Any concrete CSS document model
    - File handling
    - Configuration formats
    - Output formats

It inspects one declaration at a time and answers with diagnostics or edits.

Applying edits to a real style sheet happens in logical_css.backends.
"""

__version__ = "0.1.0"
