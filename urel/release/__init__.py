"""Release configuration for Unity package repositories.

- model: plugin descriptors, release configuration and modes
- mode: template/package detection from the marker entry
- plugins: the mode-specific plugin lists
- assembler: combines a base configuration with the mode plugins
- base: loading of the base (shared) configuration
- manifest: package.json version rewriting
"""

from __future__ import annotations
