"""
Constants for dependency nodes and their column rendering.

This module defines constants shared by the node model and the column format:
- Reserved ids and tags for the artificial root
- Reserved feature keys
- Column, arc and feature delimiters
"""

# Reserved ids
ROOT_ID = 0
NULL_ID = -1

# Tag used for every string field of the artificial root
ROOT_TAG = "@#r$%"

# Feature key holding the PropBank roleset id of a predicate
FEAT_PB = "pb"

# Column rendering
DELIM_COLUMN = "\t"
DELIM_ARCS = ";"
DELIM_ARC_LABEL = ":"
DELIM_FUNCTION_TAG = "="
DELIM_FEATS = "|"
DELIM_KEY_VALUE = "="
BLANK = "_"
