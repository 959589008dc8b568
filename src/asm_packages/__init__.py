"""ASM package tools - catalogue, manifest toggling and version stamping for Advanced Scene Manager."""

__version__ = "0.1.0"
