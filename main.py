#!/usr/bin/env python3
"""
Main script for plotting a dissociation diagram.
"""

# Pipeline overview (README-style):
# 1) Validate pKa values, concentration and title (fail fast, nothing drawn).
# 2) Compute log10 concentrations of every protonation form over pH 0-14.
# 3) Add the water [H+] and [OH-] lines and a cross at each pKa.
# 4) Log the species concentrations at each pKa.
# 5) Show the chart, or save it as PNG/PDF/SVG with --outdir.
#
# Example (phosphoric acid, 100 mM):
#     python main.py 2.1 7.2 12.6 --title "Phosphoric acid" --outdir output

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dissociation.cli import main

if __name__ == "__main__":
    sys.exit(main())
