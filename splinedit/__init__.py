'''
# splinedit

Editing, simplifying and storing plane curves made of natural cubic splines.

Curve
-----
Functions and classes for natural cubic splines and the parametric plane curves built from them.
 - curve.spline: fit a natural cubic spline through a set of nodes and evaluate it or its derivatives.
 - curve.parametric: parametric curves (x(t), y(t)) made of two splines, with a separate set of render samples.
 - curve.geometry: basic algorithms for polyline curves, including Douglas-Peucker simplification.
 - curve.spline\_geometry: measurements over parametric curves, and simplification of their sample sets.

Editing
-------
 - registry: a fixed-size table of curves addressed by handles that go stale when their curve is deleted.
 - datafile: read and write curve collections in a line-oriented text format.
 - viewport: convert between window pixels and curve coordinates.
 - editor: the state of an editing session (curves, view, selection), driven by an input layer.
 - cli: command-line batch operations on curve files.
'''
