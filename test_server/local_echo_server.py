#!/usr/bin/env python3

from flask import Flask, request, jsonify

app = Flask(__name__)

METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']

@app.route('/', defaults={'path': ''}, methods=METHODS)
@app.route('/<path:path>', methods=METHODS)
def echo(path):
    """Send back what the client put on the wire"""
    return jsonify({
        'method': request.method,
        'path': '/' + path,
        'query': request.query_string.decode('utf-8'),
        'headers': dict(request.headers),
        'body': request.get_data(as_text=True)
    })

@app.route('/plain')
def plain():
    return 'hello from the echo server\n', 200, {'Content-Type': 'text/plain'}

if __name__ == '__main__':
    print("Starting echo server on http://localhost:8000")
    app.run(host='0.0.0.0', port=8000, debug=True)
