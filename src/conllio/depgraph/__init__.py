"""
This package contains a reduced version of Leif Johnson's depgraph package
(v0.1.0): the Digraph class with its cycle finder and dot export, here
built from the head arrays of CoNLL sentences. The Chu-Liu-Edmonds
decoding of the original package is not part of it.

The code is licensed under the MIT License, see the headers of
the source files.
"""
