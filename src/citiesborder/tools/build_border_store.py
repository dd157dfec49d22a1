import argparse
import logging

from citiesborder.build import BuildConfig, build_border_store_from_config

log = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


def entrypoint():
    parser = argparse.ArgumentParser(
        description="Assemble the borders of the relations of a filtered OSM XML file into a border store"
    )
    parser.add_argument(
        "input", help="Path to the OSM XML file (optionally gzip compressed)"
    )
    parser.add_argument("output", help="Path where to write the border store")
    parser.add_argument(
        "--append",
        action="store_true",
        help="Add the borders to an existing store instead of replacing it",
    )
    args = parser.parse_args()
    log.info(f"building border store {args.output} from {args.input}")
    build_border_store_from_config(BuildConfig(args.input, args.output, args.append))


if __name__ == "__main__":
    entrypoint()
