import logging

import requests

from osmsc.sc import osmdata_sc

logger = logging.getLogger(__name__)

OVERPASS_URL = 'https://overpass-api.de/api/interpreter'
USER_AGENT = 'osmsc/0.1 (http://github.com/iandees/pyosm)'


def overpass_query(query, url=OVERPASS_URL, timeout=180):
    """POST an Overpass QL query and return the raw XML response body."""
    logger.info("Running Overpass query against %s", url)
    resp = requests.post(url, data={'data': query}, headers={'User-Agent': USER_AGENT}, timeout=timeout)
    resp.raise_for_status()
    return resp.content

def overpass_sc(query, url=OVERPASS_URL, timeout=180, **kwargs):
    """Run an Overpass query (which must ask for `out body` XML) and convert
    the response with osmdata_sc. Extra keyword arguments go to osmdata_sc."""
    return osmdata_sc(overpass_query(query, url, timeout), **kwargs)


class Api(object):
    def __init__(self, base_url='https://api.openstreetmap.org/api', timeout=60):
        self._base = base_url
        self.timeout = timeout
        self.USER_AGENT = USER_AGENT

    def _get(self, path, params={}):
        headers = {
            'User-Agent': self.USER_AGENT
        }
        logger.info("GET %s%s %s", self._base, path, params)
        resp = requests.get(self._base + path, params=params, headers=headers, timeout=self.timeout)
        resp.raise_for_status()
        return resp.content

    def get_map(self, bbox):
        """Raw XML for everything inside `bbox`, a (min_lon, min_lat, max_lon, max_lat) tuple."""
        return self._get('/0.6/map', params={'bbox': ','.join('%s' % c for c in bbox)})

    def get_map_sc(self, bbox, **kwargs):
        return osmdata_sc(self.get_map(bbox), **kwargs)

    def _get_object_full(self, kind, thing_id):
        return self._get('/0.6/{}/{}/full'.format(kind, thing_id))

    def get_way_sc(self, way_id, **kwargs):
        """A way with all of its nodes, as an SCBundle."""
        return osmdata_sc(self._get_object_full('way', way_id), **kwargs)

    def get_relation_sc(self, relation_id, **kwargs):
        """A relation with its direct members (and their nodes), as an SCBundle.

        Member relations come back without their own ways, so their way
        members appear in `rel` but not in `edge`.
        """
        return osmdata_sc(self._get_object_full('relation', relation_id), **kwargs)
