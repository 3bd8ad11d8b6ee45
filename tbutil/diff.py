# License: BSD3

"""
Finding and showing the tokens on which two treebanks disagree.
"""

from rich.text import Text

from .align import check_same_length
from .annotation import PLACEHOLDER
from .layer import extract

MISMATCH_STYLE = 'bold red'
"""
rich style used to highlight values that differ
"""


def diff_indices(sentence1, sentence2, layers):
    """Positions at which two sentences disagree on some layer.

    Parameters
    ----------
    sentence1, sentence2 : Sentence
    layers : list of Layer

    Returns
    -------
    indices : set of int
        Zero-based token positions (the root is not counted) for which
        at least one of the layers gives different values. Absent
        values are compared as such, so absent only matches absent.
    """
    check_same_length(sentence1, sentence2)
    indices = set()
    for idx, (tok1, tok2) in enumerate(zip(sentence1.tokens(),
                                           sentence2.tokens())):
        if any(extract(layer, tok1) != extract(layer, tok2)
               for layer in layers):
            indices.add(idx)
    return indices


def _shown(value):
    return PLACEHOLDER if value is None else value


def render_diff(sentence1, sentence2, diff_layers, show_layers):
    """Tabular view of a pair of sentences.

    One row per token: its 1-based index, the `show_layers` values of
    the first sentence, then for each of the `diff_layers` the values
    from both sentences side by side, highlighted if they differ.

    Returns
    -------
    rows : list of rich.text.Text
    """
    rows = []
    for idx, (tok1, tok2) in enumerate(zip(sentence1.tokens(),
                                           sentence2.tokens()), start=1):
        columns = [Text(str(idx))]
        columns.extend(Text(_shown(extract(layer, tok1)))
                       for layer in show_layers)
        for layer in diff_layers:
            val1 = extract(layer, tok1)
            val2 = extract(layer, tok2)
            style = MISMATCH_STYLE if val1 != val2 else ''
            columns.append(Text(_shown(val1), style=style))
            columns.append(Text(_shown(val2), style=style))
        rows.append(Text('\t').join(columns))
    return rows


def compare_treebanks(pairs, diff_layers, show_layers):
    """
    Render every sentence pair that disagrees on `diff_layers`, each
    followed by an empty row. Pairs that agree are skipped entirely.

    Parameters
    ----------
    pairs : iterable of (Sentence, Sentence)
        eg. from `tbutil.align.aligned_pairs`

    Yields
    ------
    row : rich.text.Text
    """
    for sent1, sent2 in pairs:
        if not diff_indices(sent1, sent2, diff_layers):
            continue
        for row in render_diff(sent1, sent2, diff_layers, show_layers):
            yield row
        yield Text('')
