"""
conllxview setup: conllxview is a library for viewing dependency
annotated corpora and exporting their sentences as dot or tikz
"""

from setuptools import setup, find_packages
import glob
import os

REQS = [
    'frozendict',
    'funcparserlib >= 1.0.0',
    'pydot',
    'tabulate',
]

TEST_REQS = [
    'pytest',
]


setup(name='conllxview',
      version='0.1',
      packages=find_packages(),
      scripts=[f for f in glob.glob('scripts/*') if not os.path.isdir(f)],
      python_requires='>=3.8',
      install_requires=REQS,
      extras_require={'test': TEST_REQS})
