import json
import unittest
from base64 import b64decode, b64encode

from pypssig import Params, PKrss, SKrss, rsskeygen
from pypssig.schemes.rss import check_keypair, check_public_key
from pypssig.utils.mcl import GT, Fr
from pypssig.utils.rng import SeededRandom
from tests.helpers import LibraryMixin, fr_power


class RssSetUpMixin(LibraryMixin):
    def setUp(self):
        super().setUp()
        self.params = Params.new(b"test")


class Test_2a_RSSKeygen(RssSetUpMixin, unittest.TestCase):
    def test_initialKeyState(self):
        sk = SKrss()
        pk = PKrss()
        self.assertTrue(sk.x.is_zero())
        self.assertTrue(sk.y.is_zero())
        self.assertTrue(pk.X_tilde.is_zero())
        self.assertEqual(pk.count_messages, 0)

    def test_familySizes(self):
        for n, high in ((0, 0), (1, 0), (2, 1), (5, 4), (8, 7)):
            _, pk = rsskeygen(n, self.params)
            self.assertEqual(len(pk.Y_tilde_i), n)
            self.assertEqual(len(pk.Y_j_1_to_n), n)
            self.assertEqual(len(pk.Y_k_nplus2_to_2n), high)

    def test_scenarioLabelTest(self):
        sk, pk = rsskeygen(5, self.params)
        self.assertEqual(len(pk.Y_tilde_i), 5)
        self.assertEqual(len(pk.Y_j_1_to_n), 5)
        self.assertEqual(len(pk.Y_k_nplus2_to_2n), 4)
        for idx, k in enumerate(range(7, 11)):
            self.assertEqual(
                pk.Y_k_nplus2_to_2n[idx], self.params.g * fr_power(sk.y, k)
            )

    def test_generatorsAndX(self):
        sk, pk = rsskeygen(3, self.params)
        self.assertEqual(pk.g, self.params.g)
        self.assertEqual(pk.g_tilde, self.params.g_tilde)
        self.assertEqual(pk.X_tilde, self.params.g_tilde * sk.x)

    def test_lowFamilies(self):
        n = 4
        sk, pk = rsskeygen(n, self.params)
        for i in range(1, n + 1):
            y_i = fr_power(sk.y, i)
            self.assertEqual(pk.Y_tilde_i[i - 1], self.params.g_tilde * y_i)
            self.assertEqual(pk.Y_j_1_to_n[i - 1], self.params.g * y_i)

    def test_exponentAdvances(self):
        _, pk = rsskeygen(6, self.params)
        family = pk.Y_j_1_to_n + pk.Y_k_nplus2_to_2n
        encoded = [el.to_bytes() for el in family]
        self.assertEqual(len(set(encoded)), len(encoded))
        encoded = [el.to_bytes() for el in pk.Y_tilde_i]
        self.assertEqual(len(set(encoded)), len(encoded))

    def test_pivotNotPublished(self):
        n = 5
        sk, pk = rsskeygen(n, self.params)
        pivot = self.params.g * fr_power(sk.y, n + 1)
        for el in pk.Y_j_1_to_n + pk.Y_k_nplus2_to_2n:
            self.assertNotEqual(el, pivot)

    def test_pairingCrossCheck(self):
        sk, pk = rsskeygen(3, self.params)
        e1 = GT.pairing(pk.g, pk.X_tilde)
        e2 = GT.pairing(pk.g * sk.x, pk.g_tilde)
        self.assertEqual(e1, e2)

    def test_seededReplay(self):
        sk1, pk1 = rsskeygen(3, self.params, SeededRandom(b"seed"))
        sk2, pk2 = rsskeygen(3, self.params, SeededRandom(b"seed"))
        self.assertEqual(sk1.to_b64(), sk2.to_b64())
        self.assertEqual(pk1.to_b64(), pk2.to_b64())

    def test_consumesTwoScalars(self):
        rng = SeededRandom(b"seed")
        sk, _ = rsskeygen(5, self.params, rng)
        expected = SeededRandom(b"seed")
        self.assertEqual(sk.x, expected.random_fr())
        self.assertEqual(sk.y, expected.random_fr())
        self.assertEqual(rng.random_fr(), expected.random_fr())

    def test_invalidCount(self):
        with self.assertRaises(ValueError):
            rsskeygen(-1, self.params)
        with self.assertRaises(TypeError):
            rsskeygen(True, self.params)

    def test_importMissingField(self):
        _, pk = rsskeygen(3, self.params)
        msg = json.loads(b64decode(pk.to_b64()))
        fields = json.loads(b64decode(msg["key"]))
        del fields["X_tilde"]
        msg["key"] = b64encode(json.dumps(fields).encode()).decode()
        data = b64encode(json.dumps(msg).encode()).decode()
        with self.assertRaises(ValueError):
            PKrss.from_b64(data)

    def test_exportImport(self):
        _, pk = rsskeygen(3, self.params)
        pk2 = PKrss.from_b64(pk.to_b64())
        self.assertEqual(pk2.count_messages, 3)
        self.assertEqual(len(pk2.Y_k_nplus2_to_2n), 2)
        self.assertEqual(pk.to_b64(), pk2.to_b64())
        self.assertTrue(check_public_key(pk2))


class Test_2b_RSSChecks(RssSetUpMixin, unittest.TestCase):
    def test_validPublicKey(self):
        for n in (0, 1, 2, 5):
            _, pk = rsskeygen(n, self.params)
            self.assertTrue(check_public_key(pk))

    def test_validKeyPair(self):
        for n in (0, 1, 5):
            sk, pk = rsskeygen(n, self.params)
            self.assertTrue(check_keypair(self.params, sk, pk))

    def test_swappedElements(self):
        _, pk = rsskeygen(4, self.params)
        pk.Y_j_1_to_n[1], pk.Y_j_1_to_n[2] = pk.Y_j_1_to_n[2], pk.Y_j_1_to_n[1]
        self.assertFalse(check_public_key(pk))

    def test_pivotInsteadOfHighFamily(self):
        n = 4
        sk, pk = rsskeygen(n, self.params)
        pk.Y_k_nplus2_to_2n[0] = self.params.g * fr_power(sk.y, n + 1)
        self.assertFalse(check_public_key(pk))
        self.assertFalse(check_keypair(self.params, sk, pk))

    def test_wrongHighFamilySize(self):
        _, pk = rsskeygen(4, self.params)
        pk.Y_k_nplus2_to_2n.pop()
        self.assertFalse(check_public_key(pk))

    def test_mismatchedKeys(self):
        sk, _ = rsskeygen(3, self.params)
        _, pk = rsskeygen(3, self.params)
        self.assertFalse(check_keypair(self.params, sk, pk))

    def test_tamperedX(self):
        sk, pk = rsskeygen(3, self.params)
        pk.X_tilde = self.params.g_tilde * Fr.from_int(7)
        self.assertTrue(check_public_key(pk))
        self.assertFalse(check_keypair(self.params, sk, pk))


if __name__ == "__main__":
    unittest.main()
