"""
esmodel command line interface: store documents and put mappings

Paths are typed (/<index>/<type>), so the server must accept REST API compatibility with version 7
"""

import argparse
import json
import logging
import sys

from esmodel.config import ENV_PREFIX, get_settings, load_type_settings
from esmodel.connection import elastic_connection
from esmodel.doctype import ElasticType
from esmodel.document import Document
from esmodel.mapping import Mapping
from esmodel.transfer import ElasticTransport


def _type(args) -> ElasticType:
    return ElasticType(args.index, args.type, ElasticTransport(elastic_connection()))


def show_config(_args):
    for k, v in get_settings().model_dump().items():
        print(f"{ENV_PREFIX.upper()}{k.upper()}={v}")


def put_mapping(args):
    mapping = Mapping(_type(args), settings=load_type_settings())
    if args.properties:
        for field, definition in json.loads(args.properties).items():
            mapping.set_property_by_path([field], definition)
    logging.info(f"Putting mapping for {args.index}/{args.type}")
    response = mapping.apply()
    print(json.dumps(response.treated_content, indent=2))


def store_document(args):
    document = Document(_type(args), json.loads(args.data), id=args.id, settings=load_type_settings())
    document.store()
    print(f"id={document.id} version={document.version}")


def update_document(args):
    document = Document(_type(args), json.loads(args.data), id=args.id, settings=load_type_settings())
    document.update()
    print(f"id={document.id} version={document.version}")


def get_document(args):
    document = _type(args).find_document_by_id(args.id, settings=load_type_settings())
    if document is None:
        logging.error(f"Document {args.id} not found in {args.index}/{args.type}")
        sys.exit(1)
    print(json.dumps(document.data, indent=2))


def main():
    parser = argparse.ArgumentParser(description=__doc__, prog="python -m esmodel")

    subparsers = parser.add_subparsers(dest="action", title="action", help="Action to perform:", required=True)
    p = subparsers.add_parser("config", help="Show the current settings")
    p.set_defaults(func=show_config)

    p = subparsers.add_parser("put-mapping", help="Put the mapping of a type to the server")
    p.add_argument("index", help="The index name")
    p.add_argument("type", help="The type name")
    p.add_argument("--properties", help='Field properties as json, e.g. \'{"title": {"type": "text"}}\'')
    p.set_defaults(func=put_mapping)

    p = subparsers.add_parser("store", help="Store a document (create it, or replace it if an id is given)")
    p.add_argument("index", help="The index name")
    p.add_argument("type", help="The type name")
    p.add_argument("data", help="The document as json")
    p.add_argument("--id", help="The document id")
    p.set_defaults(func=store_document)

    p = subparsers.add_parser("update", help="Partially update a stored document")
    p.add_argument("index", help="The index name")
    p.add_argument("type", help="The type name")
    p.add_argument("id", help="The document id")
    p.add_argument("data", help="The fields to update as json")
    p.set_defaults(func=update_document)

    p = subparsers.add_parser("get", help="Show a stored document")
    p.add_argument("index", help="The index name")
    p.add_argument("type", help="The type name")
    p.add_argument("id", help="The document id")
    p.set_defaults(func=get_document)

    args = parser.parse_args()

    logging.basicConfig(format="[%(levelname)-7s:%(name)-15s] %(message)s", level=get_settings().log_level.upper())
    es_logger = logging.getLogger("elasticsearch")
    es_logger.setLevel(logging.WARNING)

    args.func(args)


if __name__ == "__main__":
    main()
