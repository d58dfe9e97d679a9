"""BOSH acceptance-test helpers: stemcell resolution and cloud adapter contracts."""
