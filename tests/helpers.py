"""
Test helpers shared across the suite
"""
import json

import httpx


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was handed"""

    def __init__(self, handler):
        self.requests = []

        def recording_handler(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)

    @property
    def payloads(self):
        return [json.loads(request.content) for request in self.requests]
