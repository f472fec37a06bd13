# This code is licensed under the MIT License (see LICENSE file for details)

import logging
import os
import pathlib
import tempfile

from .curve.parametric import ParametricCurve

logger = logging.getLogger(__name__)

RECORD_FIELDS = ('x', 'y', 'parameter', 'sample')

class FormatError(ValueError):
    """Raised when a curve file cannot be parsed."""
    pass

def _format_values(values):
    # repr gives the shortest decimal string that reads back to the same float
    return ' '.join(repr(float(v)) for v in values)

def dumps(registry):
    """Serialize all curves in a CurveRegistry to text.

    Each curve is written as four lines of space-separated numbers (control
    point x values, control point y values, parameter values, and render
    samples) followed by a blank line. Curves are written in slot order.

    Curves with no nodes cannot be represented (four empty lines read back as
    the end of the file) and are omitted.
    """
    records = []
    for handle, curve in registry.items():
        if len(curve) == 0:
            logger.debug('Not saving empty curve in slot %d', handle.index)
            continue
        lines = [_format_values(v) for v in (curve.xs, curve.ys, curve.ts, curve.samples)]
        records.append('\n'.join(lines) + '\n\n')
    return ''.join(records)

def _parse_line(line, line_number):
    try:
        return [float(token) for token in line.split()]
    except ValueError:
        raise FormatError('Line {}: could not parse numeric values from {!r}.'.format(line_number, line.strip()))

def _iter_records(text):
    """Yield (xs, ys, ts, samples) for each record in text."""
    lines = text.splitlines()
    i = 0
    while True:
        # blank lines between records are skipped; running out of input ends
        # the file (an all-empty record is therefore just trailing blank lines)
        while i < len(lines) and not lines[i].strip():
            i += 1
        if i >= len(lines):
            return
        record_lines = lines[i:i+4]
        record_lines += [''] * (4 - len(record_lines))
        fields = [_parse_line(line, i + j + 1) for j, line in enumerate(record_lines)]
        for j, (name, values) in enumerate(zip(RECORD_FIELDS, fields)):
            if not values:
                raise FormatError('Line {}: {} values missing for curve starting at line {}.'.format(i + j + 1, name, i + 1))
        xs, ys, ts, samples = fields
        if not len(xs) == len(ys) == len(ts):
            raise FormatError('Line {}: curve has {} x values, {} y values and {} parameters; counts must match.'.format(
                i + 1, len(xs), len(ys), len(ts)))
        yield xs, ys, ts, samples
        i += 4

def loads(text, registry):
    """Replace the contents of a CurveRegistry with curves parsed from text
    (see dumps() for the format).

    The registry is cleared before parsing begins. If parsing fails, a
    FormatError is raised and the registry is left empty: previously loaded
    curves are not restored.

    Returns: list of handles of the loaded curves.
    """
    registry.clear()
    handles = []
    try:
        for xs, ys, ts, samples in _iter_records(text):
            handles.append(registry.add(ParametricCurve(xs, ys, ts, samples)))
    except Exception:
        registry.clear()
        raise
    return handles

def dump(path, registry):
    """Write all curves in a registry to a file.

    The text is written to a temporary file beside the destination, which then
    replaces the destination, so an error never leaves a partially-written file.
    """
    s = dumps(registry)
    path = pathlib.Path(path)
    prefix = path.name + '-temp.'
    fd, tmp_path = tempfile.mkstemp(prefix=prefix, dir=str(path.parent))
    try:
        with os.fdopen(fd, 'w', encoding='ascii') as f:
            f.write(s)
        os.replace(tmp_path, str(path))
    except Exception:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
    logger.info('Saved %d curves to %s', s.count('\n\n'), path)

def load(path, registry):
    """Replace the contents of a registry with the curves stored in a file.

    If the file cannot be opened, OSError is raised and the registry is
    untouched. Once the file is open the registry is cleared; any subsequent
    read or parse error leaves it empty.

    Returns: list of handles of the loaded curves.
    """
    path = pathlib.Path(path)
    with path.open('r', encoding='utf8') as f:
        registry.clear()
        text = f.read()
    handles = loads(text, registry)
    logger.info('Loaded %d curves from %s', len(handles), path)
    return handles
