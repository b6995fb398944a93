"""
Example style sheet covering every conversion kind.

Used by the demo script and as a fixture in tests.
"""
from typing import List

from logical_css.model import Declaration


EXAMPLE_STYLESHEET = """\
.card {
    margin-left: 8px;
    padding: 4px 12px 4px 12px;
    border-top-left-radius: 3px;
    text-align: left;
}

.sidebar {
    float: right;
    margin: 0 auto;
    padding: 1px 2px 3px 4px;
}

@media print {
    .toolbar {
        justify-content: right;
        right: 0 !important;
        color: red;
    }
}
"""


def build_example_declarations() -> List[Declaration]:
    """Declarations of the `.card` and `.sidebar` rules above, in order."""
    return [
        Declaration("margin-left", "8px"),
        Declaration("padding", "4px 12px 4px 12px"),
        Declaration("border-top-left-radius", "3px"),
        Declaration("text-align", "left"),
        Declaration("float", "right"),
        Declaration("margin", "0 auto"),
        Declaration("padding", "1px 2px 3px 4px"),
    ]
