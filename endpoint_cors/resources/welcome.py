""" Welcome module"""
#pylint: disable=too-few-public-methods
import json
import falcon
import jsend


class Welcome():
    """Welcome class"""
    MESSAGE = "Welcome"

    def on_get(self, _req, resp):
        #pylint: disable=no-self-use
        """
        on GET request
        """
        resp.text = json.dumps(jsend.success({"message": self.MESSAGE}))
        resp.status = falcon.HTTP_200

    def on_put(self, req, resp):
        #pylint: disable=no-self-use
        """
        on PUT request, echoes the name it was given
        """
        resp.text = json.dumps(jsend.fail({"message": "Missing name"}))
        resp.status = falcon.HTTP_400
        data = req.get_media(default_when_empty=None)
        if isinstance(data, dict) and data.get("name"):
            resp.text = json.dumps(jsend.success({"message": self.MESSAGE + " " + data["name"]}))
            resp.status = falcon.HTTP_200
