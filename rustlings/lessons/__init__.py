"""Worked answers to exercises on traits, structures, collections, errors, conversions, string commands and exact division."""