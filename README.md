# cipherbox

An interactive console tool that encrypts and decrypts files and text
with three ciphers:

1. **XOR**: each byte is XOR-ed with a repeating key.
2. **Beaufort**: each byte becomes `(key - byte) mod 256`, with the key
   repeated. Running it a second time gives back the original.
3. **Twofish [CFB]**: a Twofish-style block cipher in 128-bit cipher feedback
   mode. The ciphertext is the same length as the plaintext. Encrypted files
   begin with the 16-byte IV.

Each run generates a new key of 16 random bytes. Keys are shown and stored
as upper-case hex.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
cipherbox
```

Use `--data-dir DIR` to work in a directory other than `data`.

Choose an algorithm (0–3), then a scenario (0 returns to the main menu):

| Files                        | Console                      |
|------------------------------|------------------------------|
| 1. Encrypt + decrypt         | 4. Encrypt + decrypt         |
| 2. Encrypt only              | 5. Encrypt only              |
| 3. Decrypt only              | 6. Decrypt only              |

- File scenarios read an input file. The tool asks whether the file is in
  the data directory or at a path you type. Output files go into the data
  directory, which is created if it does not exist. Keys are saved there as
  `<name>.txt`.
- Console scenarios encrypt a line of text, taken as UTF-8. They print the
  result and its hex form, together with the key and, for Twofish, the IV.
  "Decrypt only" asks for the ciphertext, the key and, for Twofish, the IV,
  all in hex.

Menus and messages are in Russian. The tool exits on `0`, end of input or
Ctrl-C.

## Library use

```python
from cipherbox import xor, beaufort, twofish
from cipherbox.support import generate_key, bytes_to_hex, hex_to_bytes

random_bytes = generate_key(16)
iv = generate_key(16)

ciphertext = twofish.encrypt(b"hello", random_bytes, iv)
assert twofish.decrypt(ciphertext, random_bytes, iv) == b"hello"

assert xor.decrypt(xor.encrypt(b"data", random_bytes), random_bytes) == b"data"
assert beaufort.decrypt(beaufort.encrypt(b"data", random_bytes), random_bytes) == b"data"

assert hex_to_bytes(bytes_to_hex(random_bytes)) == random_bytes
```

The library has these parts:

- `twofish.TwofishCfb(key)` gives `encrypt_block`, `encrypt(data, iv)` and
  `decrypt(data, iv)`.
- `cipherbox.fileio.FileDialog` is the interactive file prompt that the
  command uses.
- `cipherbox.menu` holds the menu enums and renders the menus.

## Limitations

The Twofish cipher is Twofish-style only. It is not checked against the
standard Twofish test vectors, so its output should not be expected to work
with other Twofish implementations. None of the ciphers authenticate the
data they encrypt.

## Running the tests

```
pip install .[test]
pytest
```