"""
Scoring a predicted treebank against a gold standard one
"""


def percentage(correct, total):
    """
    `100 * correct / total`, which is NaN if there is nothing to count
    """
    if total == 0:
        return float('nan')
    return 100. * correct / total
