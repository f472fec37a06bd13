'''
Curve
-----
Natural cubic splines and the plane curves built from them.
 - curve.spline: fit and evaluate one-dimensional natural cubic splines.
 - curve.parametric: parametric x(t), y(t) curves made of two splines sharing a parameter.
 - curve.geometry: basic algorithms for polyline curves, including Douglas-Peucker simplification.
 - curve.spline_geometry: measurements over parametric curves, and choosing sparse sample sets by simplification.
 '''
