"""
tbutil provides utilities for comparing and scoring treebanks, ie. corpora
of sentences annotated with (among others) lemmas, part of speech tags,
morphological features and dependency trees.

It has a small layered structure:

* base layer (tbutil.annotation, tbutil.corpus): tokens, sentences
  and reading them from CoNLL-U files

* layer access (tbutil.layer): named annotation layers that can be
  extracted from any token (form, upos, `feature:Case`, ...)

* comparison (tbutil.align, tbutil.diff, tbutil.metrics): walking two
  treebanks in lockstep, spotting the tokens on which they disagree
  and computing accuracy and attachment scores

* checks (tbutil.structure): dependency graphs of single sentences,
  eg. to find cycles in their head links

The command line front-end (see `tbutil.cmd`) is a thin layer on top::

                  cmd                       [front-end]
                   |
        +----------+-----------+
        |          |           |
        v          v           v
      diff      metrics      align         [comparison]
        |          |           |
        +-----> layer <--------+
                   |
                   v
     corpus -> annotation                  [base layer]
"""
