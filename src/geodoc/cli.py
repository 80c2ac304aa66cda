"""Command-line entry point: print geospatial query documents as JSON.

Examples:
    geodoc-query near "2.99,3.99" --field location --max-distance 500
    geodoc-query geo-near location "10 20" --limit 10 --spherical
    geodoc-query within-box "1,1" "5,5" --field area
"""
import argparse
import json
import logging
import sys

from geodoc.errors import GeospatialError
from geodoc.query import build_geo_near_stage, build_polygon_within_clause, near_clause
from geodoc.fields.box import Box

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='geodoc-query', description='Build MongoDB geospatial query documents')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log debug output to stderr')
    sub = parser.add_subparsers(dest='command', required=True)

    near = sub.add_parser('near', help='$near / $nearSphere selector')
    near.add_argument('point', help='Point as "x,y" or "x y"')
    near.add_argument('--field', default='location')
    near.add_argument('--max-distance', type=float, default=None)
    near.add_argument('--spherical', action='store_true')

    geo_near = sub.add_parser('geo-near', help='$geoNear aggregation pipeline')
    geo_near.add_argument('field')
    geo_near.add_argument('point')
    geo_near.add_argument('--limit', type=int, default=None)
    geo_near.add_argument('--spherical', action='store_true')
    geo_near.add_argument('--distance-field', default='distance')

    within = sub.add_parser('within-box', help='$geoWithin polygon around two corners')
    within.add_argument('corner1')
    within.add_argument('corner2')
    within.add_argument('--field', default='location')
    return parser


def _run(args):
    if args.command == 'near':
        options = {'max_distance': args.max_distance}
        if args.spherical:
            options['spherical'] = True
        return near_clause(args.field, args.point, options)
    if args.command == 'geo-near':
        options = {'spherical': args.spherical, 'distanceField': args.distance_field}
        if args.limit is not None:
            options['limit'] = args.limit
        return build_geo_near_stage(args.field, args.point, options)
    box = Box([args.corner1, args.corner2])
    return {args.field: build_polygon_within_clause(box.bounding_polygon())}


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    try:
        result = _run(args)
    except GeospatialError as exc:
        logger.error('%s', exc)
        return 2
    sys.stdout.write(json.dumps(result) + '\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
