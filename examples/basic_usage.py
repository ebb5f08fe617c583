#!/usr/bin/env python3
"""Basic blake2core example.

This example demonstrates one-shot hashing, incremental hashing,
keyed hashing with tag verification, and configuration.
"""

import sys
from pathlib import Path

# Add the parent directory to the path so we can import blake2core
sys.path.insert(0, str(Path(__file__).parent.parent))

from blake2core import Blake2b, Config, create_context, finalize, hash, update
from blake2core.crypto import AuthenticationError, blake2b_mac, verify_mac


def basic_example():
    """Run a basic example of blake2core usage."""
    print("blake2core basic example")
    print("=" * 40)
    
    # Example 1: One-shot hashing
    print("\n1. One-shot BLAKE2b-512...")
    digest = hash(b"Hello, world!", 64)
    print(f"   ✓ {digest.hex()}")
    
    # Example 2: Incremental hashing
    print("\n2. Incremental hashing...")
    ctx = create_context(32)
    update(ctx, b"Hello, ")
    update(ctx, b"world!")
    print(f"   ✓ {finalize(ctx).hex()}")
    
    # Example 3: hashlib-style object
    print("\n3. Streaming object...")
    h = Blake2b(digest_size=16)
    for chunk in (b"a" * 100, b"b" * 200, b"c" * 300):
        h.update(chunk)
    print(f"   ✓ {h!r}: {h.hexdigest()}")
    
    # Example 4: Keyed hashing as a MAC
    print("\n4. Keyed hashing...")
    key = b"example key"
    tag = blake2b_mac(key, b"message")
    verify_mac(key, b"message", tag)
    print(f"   ✓ Tag verified: {tag.hex()}")
    try:
        verify_mac(key, b"tampered", tag)
    except AuthenticationError as e:
        print(f"   ✓ Tampered message rejected: {e}")
    
    # Example 5: Environment configuration
    print("\n5. Environment configuration...")
    config = Config.from_environment()
    errors = config.validate()
    if errors:
        print(f"   ✗ Invalid configuration: {errors}")
        return
    h = Blake2b.from_config(config, b"configured")
    print(f"   ✓ digest_size={h.digest_size}: {h.hexdigest()}")
    
    print("\nBasic example completed successfully!")


if __name__ == "__main__":
    basic_example()
