# This class holds what the transport handed back for one GET
class Response(object):
    def __init__(self, resp_dict):
        # The URL that was requested
        self.url = resp_dict["url"]

        # The HTTP status code returned (e.g., 200, 404), None if nothing came back
        self.status = resp_dict.get("status")
        self.reason = resp_dict.get("reason", "")

        # If there was an error, store it; otherwise, set to None
        self.error = resp_dict["error"] if "error" in resp_dict else None

        # Raw body bytes exactly as received
        self.content = resp_dict.get("content", b"")

    @property
    def ok(self) -> bool:
        """The transport call itself succeeded; status codes are not judged."""
        return self.error is None
