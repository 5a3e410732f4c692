"""Tree models of directory structures with name-based exclusion rules.

This package provides the node classes describing a directory tree, an
asynchronous builder that walks the filesystem, and the structural comparison
of two built trees.
"""
