# This code is licensed under the MIT License (see LICENSE file for details)
"""
Batch operations on curve files.

Examples:
    splinedit demo outline.txt
    splinedit info outline.txt
    splinedit simplify outline.txt 0.05 -o outline-simple.txt
    splinedit resample outline.txt 200
"""

import argparse
import logging
import sys

from . import config
from . import datafile
from .editor import Editor
from .registry import CurveRegistry

logger = logging.getLogger(__name__)

def _info(args):
    registry = CurveRegistry()
    datafile.load(args.file, registry)
    for handle, curve in registry.items():
        bounds = curve.bounds
        print('curve {}: {} nodes, {} samples, x [{:g}, {:g}], y [{:g}, {:g}]'.format(
            handle.index, len(curve), len(curve.samples), *bounds))

def _simplify(args):
    editor = Editor(config.EditorConfig(simplify_count=args.count))
    editor.load(args.file)
    editor.simplify(args.epsilon, all_curves=True)
    editor.save(args.output or args.file)

def _resample(args):
    editor = Editor()
    editor.load(args.file)
    editor.set_sample_count(args.count, all_curves=True)
    editor.save(args.output or args.file)

def _demo(args):
    editor = Editor()
    editor.load_demo()
    editor.save(args.output)

def get_parser():
    parser = argparse.ArgumentParser(prog='splinedit', description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('-v', '--verbose', action='store_true', help='log debugging information')
    subparsers = parser.add_subparsers(dest='command', required=True)

    info = subparsers.add_parser('info', help='describe the curves in a file')
    info.add_argument('file')
    info.set_defaults(func=_info)

    simplify = subparsers.add_parser('simplify', help='reduce the samples of every curve in a file')
    simplify.add_argument('file')
    simplify.add_argument('epsilon', type=float, help='maximum deviation, in curve units')
    simplify.add_argument('-o', '--output', help='output file (default: overwrite input)')
    simplify.add_argument('--count', type=int, default=config.EditorConfig.simplify_count,
        help='points in the dense approximation (default: %(default)s)')
    simplify.set_defaults(func=_simplify)

    resample = subparsers.add_parser('resample', help='sample every curve evenly')
    resample.add_argument('file')
    resample.add_argument('count', type=int)
    resample.add_argument('-o', '--output', help='output file (default: overwrite input)')
    resample.set_defaults(func=_resample)

    demo = subparsers.add_parser('demo', help='write the built-in demo outline')
    demo.add_argument('output')
    demo.set_defaults(func=_demo)
    return parser

def main(argv=None):
    args = get_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )
    try:
        args.func(args)
    except (OSError, ValueError, RuntimeError) as e:
        logger.error('%s failed: %s', args.command, e)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
