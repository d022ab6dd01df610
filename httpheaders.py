from httperrors import InvalidHeaderFormat

FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'

def parse_header(raw):
    """Split a raw "Key: Value" string on its first colon"""
    key, sep, value = raw.partition(':')
    if not sep:
        raise InvalidHeaderFormat(raw)
    return key.strip(), value.strip()

def assemble(host, user_headers=(), data=''):
    """Build the header set: defaults, then user headers, then body headers"""
    headers = {
        "Host": host,
        "Accept": "*/*",
        "Connection": "close"
    }

    for raw in user_headers:
        key, value = parse_header(raw)
        headers[key] = value

    if data:
        headers["Content-Length"] = str(len(data.encode('utf-8', errors='surrogateescape')))
        if not any(k.lower() == 'content-type' for k in headers):
            headers["Content-Type"] = FORM_CONTENT_TYPE

    return headers
