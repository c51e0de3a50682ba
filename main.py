"""Development entrypoint.

Runs the catalog API on the same port the service has always used.
"""

from catalog import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8080, debug=False, threaded=True)
