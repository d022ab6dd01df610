HTTP_VERSION = 'HTTP/1.1'

def request_line(method, path):
    """Request line without the trailing CRLF"""
    return f"{method} {path} {HTTP_VERSION}"

def serialize(method, path, headers, body=''):
    """Render a request in HTTP/1.1 wire format"""
    req = request_line(method, path) + "\r\n"
    for k, v in headers.items():
        req += f"{k}: {v}\r\n"
    req += "\r\n"
    if body:
        req += body
    return req.encode('utf-8', errors='surrogateescape')
