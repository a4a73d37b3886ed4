import tornado.web


class PlainTextHandler(tornado.web.RequestHandler):
    """Base for gateway handlers: plain-text bodies, including error pages."""

    def set_default_headers(self):
        self.set_header("Content-Type", "text/plain; charset=UTF-8")

    def write_error(self, status_code, **kwargs):
        if status_code == 404:
            self.finish("Not found\n")
        else:
            self.finish(f"{self._reason}\n")


class NotFoundHandler(PlainTextHandler):
    """Answers every route other than POST /command."""

    def prepare(self):
        raise tornado.web.HTTPError(404)
