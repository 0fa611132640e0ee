"""
Posts alerts to an external webhook (a Discord-style endpoint that takes
{"content": "..."}) without blocking the reactor.
"""

import logging
from io import BytesIO

import simplejson
from twisted.internet import defer, reactor
from twisted.web.client import Agent, FileBodyProducer, readBody
from twisted.web.http_headers import Headers

from codealert.constants import WEBHOOK_HEADERS


class WebhookDispatcher(object):

    """
    Fire-and-forget webhook sender. One attempt per alert; whatever goes
    wrong is logged and then forgotten.
    """

    def __init__(self, url, agent=None, connect_timeout=10):
        self.url = url
        if agent is None:
            agent = Agent(reactor, connectTimeout=connect_timeout)
        self.agent = agent

    def buildPayload(self, content):
        return simplejson.dumps({"content": content}).encode("utf-8")

    def buildHeaders(self):
        return Headers(dict((name, [value]) for name, value in WEBHOOK_HEADERS.items()))

    def send(self, content):
        """
        Posts content to the webhook. Returns a Deferred that fires with the
        HTTP status code, or None if the request never got a response.
        """
        d = defer.maybeDeferred(
            self.agent.request,
            b"POST",
            self.url.encode("utf-8"),
            self.buildHeaders(),
            FileBodyProducer(BytesIO(self.buildPayload(content))),
        )
        d.addCallback(self.gotResponse)
        d.addErrback(self.requestFailed)
        return d

    def gotResponse(self, response):
        code = response.code
        if 200 <= code < 300:
            logging.log(logging.INFO, "Alert sent to webhook successfully.")
            return code
        d = readBody(response)
        d.addCallback(self.gotErrorBody, code)
        d.addErrback(self.gotNoErrorBody, code)
        return d

    def gotErrorBody(self, body, code):
        logging.log(logging.WARN, "Failed to send alert to webhook. Code: %s, Response: %s" % (code, body.decode("utf-8", "replace")))
        return code

    def gotNoErrorBody(self, failure, code):
        logging.log(logging.WARN, "Failed to send alert to webhook. Code: %s, Response: <unreadable: %s>" % (code, failure.getErrorMessage()))
        return code

    def requestFailed(self, failure):
        logging.log(logging.ERROR, "Failed to send alert to webhook: %s" % failure.getErrorMessage())
        return None
