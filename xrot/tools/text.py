#!/usr/bin/env python3
# -*- coding: utf-8 -*-
''' Collection of tools for text-related modifications. '''

# =============================================================================
# Imports
# =============================================================================
import textwrap

import matplotlib.pyplot as plt

# =============================================================================
# Tools
# =============================================================================

def boldify_str(string):
    if plt.rcParams['text.usetex']:
        return ''.join([r'\textbf{', string, '}'])
    else:
        return string

def wrap_str(string):
    return textwrap.indent(textwrap.fill(string, width=80), '# ')

def numbered_labels(prefix, n):
    '''Return labels `prefix 1`, ..., `prefix n` used as default tick labels.'''
    return ['{:} {:d}'.format(prefix, i + 1) for i in range(n)]
