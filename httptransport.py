import socket, logging
from contextlib import closing

import httperrors

logger = logging.getLogger(__name__)

def read_until_close(stream):
    """Read a binary stream line by line until the peer closes it.

    A read error ends the loop the same way a clean close does, so the
    caller always gets whatever arrived before it.
    """
    resp = bytearray()
    try:
        for line in iter(stream.readline, b''):
            resp.extend(line)
    except OSError as e:
        logger.warning("Response cut short after %d bytes: %s", len(resp), e)
    return bytes(resp)

def send(address, request):
    """Send a raw request to a (host, port) address and return the response bytes as received"""
    host, port = address
    try:
        conn = socket.create_connection(address)
    except OSError as e:
        raise httperrors.ConnectionError(f"error connecting to {host}:{port}: {e}") from e

    with closing(conn):
        logger.debug("Connected to %s:%s", host, port)
        try:
            conn.sendall(request)
        except OSError as e:
            raise httperrors.SendError(f"error sending request: {e}") from e
        logger.debug("Sent %d bytes", len(request))

        with conn.makefile('rb') as stream:
            resp = read_until_close(stream)
        logger.debug("Received %d bytes", len(resp))

    return resp
