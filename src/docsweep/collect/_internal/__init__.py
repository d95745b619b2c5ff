"""Internal extraction machinery. Import from ``docsweep.collect`` instead."""
