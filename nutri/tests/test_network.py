import unittest
from unittest.mock import patch

from nutri.utilities import network


class TestServerUrls(unittest.TestCase):

    def test_all_interfaces_adds_lan_url(self):
        with patch.object(network, "get_local_ip", return_value="192.168.1.20"):
            self.assertEqual(network.server_urls("0.0.0.0", 8000),
                             ["http://localhost:8000", "http://192.168.1.20:8000"])

    def test_loopback_only(self):
        with patch.object(network, "get_local_ip", return_value="127.0.0.1"):
            self.assertEqual(network.server_urls("0.0.0.0", 8000), ["http://localhost:8000"])
        self.assertEqual(network.server_urls("127.0.0.1", 9000), ["http://localhost:9000"])

    def test_explicit_host(self):
        self.assertEqual(network.server_urls("10.0.0.5", 8080),
                         ["http://localhost:8080", "http://10.0.0.5:8080"])
