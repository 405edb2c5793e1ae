"""
Root test package marker.

Only this directory carries an __init__.py; the test subdirectories rely on
rootdir-relative discovery, so test module basenames must stay unique across
tests/unit/suite_accounting/.
"""
