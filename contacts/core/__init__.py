"""
Core utilities shared across the contacts package.

Configuration (env vars, storage paths, identity policy) and logging setup live
here so that domain and storage modules never read os.environ directly.
"""
