"""
Core Package.

Modules:
    - ``vocabulary``: Fixed Convex API name sets.
    - ``classifier``: Call-shape predicates over libcst nodes.
    - ``context``: Per-file reporting capability and violation records.
    - ``registry``: Rule definitions, registration decorator and plugin surface.
    - ``engine``: Parses modules and dispatches nodes to rule hooks.
"""
