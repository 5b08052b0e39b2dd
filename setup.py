# Copyright 2024 PerFlow Authors
# Licensed under the Apache License, Version 2.0

"""
setup.py for profmd

Installation:
    pip install .

Development installation:
    pip install -e .[test]
"""

from setuptools import setup, find_packages


long_description = """
# profmd

Turn async-profiler `collapsed` stack samples into a Markdown report that is
easy to read and to paste into an LLM.

## Features

- Tolerant line parser for `frame1;frame2;...;frameN <count>` text
- Self-time hotspots, top stacks and per-function stack details
- Aggregated call tree with bounded depth and fan-out
- Thread-frame filtering for per-thread profiles

## Quick Start

```python
from profmd import ReportOptions, to_markdown

options = ReportOptions(action="stop", event="cpu", top_n=10)
options.setCollapsed(open("profile.collapsed").read())
print(to_markdown(options))
```
"""

setup(
    name='profmd',
    version='0.1.0',
    author='profmd Authors',
    author_email='',
    description='Markdown reports from collapsed stack profiles',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(include=['profmd', 'profmd.*']),
    python_requires='>=3.7',
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Libraries',
        'Topic :: System :: Monitoring',
    ],
    keywords='profiling async-profiler collapsed stacks flamegraph markdown',
)
