# Copyright (c) Syntropy Systems
"""fraudboard command line interface."""
