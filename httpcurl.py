#!/usr/bin/env python3

import sys, logging, argparse
from dataclasses import dataclass

import httperrors
from httpurl import resolve
from httpheaders import assemble
from httprequest import request_line, serialize
from httptransport import send

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class RequestOptions:
    """Everything the command line says about the request"""
    url: str
    method: str = 'GET'
    data: str = ''
    headers: tuple = ()

def build_parser():
    parser = argparse.ArgumentParser(description="Raw HTTP/1.1 client")
    parser.add_argument('url', nargs='*', help='URL to send the request to')
    parser.add_argument('-X', dest='method', default='GET', help='HTTP method')
    parser.add_argument('-d', dest='data', default='', help='HTTP payload')
    parser.add_argument('-H', dest='headers', action='append', default=[],
                        help="HTTP header 'Key: Value' (repeatable)")
    parser.add_argument('-v', '--verbose', action='store_true', help='Log connection details to stderr')
    return parser

def parse_args(argv=None):
    """Turn command line arguments into RequestOptions"""
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    if len(args.url) != 1:
        parser.print_usage(sys.stderr)
        raise httperrors.ArgumentCountError("error: exactly one URL must be provided")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    return RequestOptions(
        url=args.url[0],
        method=args.method.upper(),
        data=args.data,
        headers=tuple(args.headers),
    )

def write_raw(out, data):
    """Write bytes to a console stream, through its binary buffer when it has one"""
    buffer = getattr(out, 'buffer', None)
    if buffer is None:
        out.write(data.decode('utf-8', errors='surrogateescape'))
        return
    out.flush()
    buffer.write(data)
    buffer.flush()

def run(options, out=None):
    """Resolve, build, send and print one request; returns the response bytes"""
    out = out or sys.stdout

    try:
        target = resolve(options.url)
    except httperrors.UrlParseError as e:
        raise httperrors.UrlParseError(f"Error parsing URL: {e}") from e

    if target.protocol != 'http':
        raise httperrors.UnsupportedProtocolError("Error: Only HTTP protocol is supported")

    headers = assemble(target.host, options.headers, options.data)

    summary = f"Connecting to {target.host}\n"
    summary += f"Sending request {request_line(options.method, target.path)}\n"
    for k, v in headers.items():
        summary += f"{k}: {v}\n"
    summary += "\n"
    write_raw(out, summary.encode('utf-8', errors='surrogateescape'))

    request = serialize(options.method, target.path, headers, options.data)
    logger.debug("Request for %s:%s is %d bytes", target.host, target.port, len(request))

    response = send(target.address, request)
    write_raw(out, response)
    return response

def main(argv=None):
    try:
        run(parse_args(argv))
    except httperrors.HTTPClientError as e:
        write_raw(sys.stdout, f"{e}\n".encode("utf-8", errors="surrogateescape"))
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
