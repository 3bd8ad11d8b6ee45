"""
tbutil setup: tbutil is a library for comparing and scoring
dependency treebanks
"""

from setuptools import setup, find_packages
import glob
import os

REQS = [
    'conllu >= 4.0',
    'frozendict',
    'networkx',
    'rich',
    'tabulate',
]


setup(name='tbutil',
      version='0.1',
      packages=find_packages(),
      scripts=[f for f in glob.glob('scripts/*') if not os.path.isdir(f)],
      install_requires=REQS,
      extras_require={'test': ['pytest']})
