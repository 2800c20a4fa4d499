import logging
import os

from pypssig import Params, generator, key, load_library
from pypssig.definitions import SCHEMES
from pypssig.utils.mcl import GT, Fr
from pypssig.utils.rng import SeededRandom

for scheme in SCHEMES:
    logging.getLogger(f"pypssig.schemes.{scheme}").setLevel(logging.CRITICAL)


class LibraryMixin:
    def setUp(self):
        if os.environ.get("PYPSSIG_SKIP_WITHOUT_MCL") == "1":
            try:
                load_library()
            except RuntimeError as e:
                self.skipTest(f"mcl not available: {e}")
        else:
            load_library()


class SetUpMixin(LibraryMixin):
    scheme: str | None = None
    label = b"test"

    def setUp(self):
        super().setUp()
        if self.scheme is None:
            raise ValueError("Missing scheme")
        self.params = Params.new(self.label)
        self.keygen = generator(self.scheme)


class BaseKeygenMixin(SetUpMixin):
    scheme: str
    # Slots added on top of count_messages by the scheme
    extra_slots: int

    def test_1a_initialKeyState(self):
        sk = key(self.scheme, "secret")()
        vk = key(self.scheme, "public")()
        self.assertTrue(sk.x.is_zero())
        self.assertEqual(sk.y, [])
        self.assertTrue(vk.X_tilde.is_zero())
        self.assertEqual(vk.Y_tilde, [])

    def test_1b_keyShape(self):
        for n in (0, 1, 5):
            sk, vk = self.keygen(n, self.params)
            self.assertEqual(len(sk.y), n + self.extra_slots)
            self.assertEqual(len(vk.Y_tilde), n + self.extra_slots)
            self.assertFalse(sk.x.is_zero())
            self.assertFalse(vk.X_tilde.is_zero())

    def test_1c_publicMatchesSecret(self):
        sk, vk = self.keygen(4, self.params)
        self.assertEqual(vk.X_tilde, self.params.g_tilde * sk.x)
        for y_i, Y_tilde_i in zip(sk.y, vk.Y_tilde):
            self.assertEqual(Y_tilde_i, self.params.g_tilde * y_i)

    def test_1d_pairingCrossCheck(self):
        sk, vk = self.keygen(3, self.params)
        e1 = GT.pairing(self.params.g, vk.X_tilde)
        e2 = GT.pairing(self.params.g * sk.x, self.params.g_tilde)
        self.assertEqual(e1, e2)
        for y_i, Y_tilde_i in zip(sk.y, vk.Y_tilde):
            e1 = GT.pairing(self.params.g, Y_tilde_i)
            e2 = GT.pairing(self.params.g * y_i, self.params.g_tilde)
            self.assertEqual(e1, e2)

    def test_1e_independentSlots(self):
        sk, _ = self.keygen(6, self.params)
        scalars = [sk.x.to_bytes()] + [y_i.to_bytes() for y_i in sk.y]
        self.assertEqual(len(set(scalars)), len(scalars))

    def test_1f_seededReplay(self):
        sk1, vk1 = self.keygen(3, self.params, SeededRandom(b"seed"))
        sk2, vk2 = self.keygen(3, self.params, SeededRandom(b"seed"))
        sk3, _ = self.keygen(3, self.params, SeededRandom(b"other"))
        self.assertEqual(sk1.to_b64(), sk2.to_b64())
        self.assertEqual(vk1.to_b64(), vk2.to_b64())
        self.assertNotEqual(sk1.x, sk3.x)

    def test_1g_invalidCount(self):
        with self.assertRaises(ValueError):
            self.keygen(-1, self.params)
        with self.assertRaises(TypeError):
            self.keygen("5", self.params)
        with self.assertRaises(TypeError):
            self.keygen(True, self.params)

    def test_1h_exportImport(self):
        sk, vk = self.keygen(3, self.params)
        sk2 = key(self.scheme, "secret").from_b64(sk.to_b64())
        vk2 = key(self.scheme, "public").from_b64(vk.to_b64())
        self.assertEqual(sk.x, sk2.x)
        self.assertEqual(len(sk2.y), len(sk.y))
        for a, b in zip(sk.y, sk2.y):
            self.assertEqual(a, b)
        self.assertEqual(vk.X_tilde, vk2.X_tilde)
        for a, b in zip(vk.Y_tilde, vk2.Y_tilde):
            self.assertEqual(a, b)

    def test_1i_reprHidesSecrets(self):
        sk, _ = self.keygen(1, self.params)
        self.assertNotIn(sk.x.to_hex(), repr(sk))
        self.assertIn("<redacted>", repr(sk))


def fr_power(y: Fr, k: int) -> Fr:
    """y^k by repeated multiplication, independent of Fr.pow"""
    ret = Fr.one()
    for _ in range(k):
        ret = ret * y
    return ret
