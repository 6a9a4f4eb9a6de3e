#!/usr/bin/env python3
"""Document store showcase — runs standalone without external services.

Demonstrates:
  - Generating author identities
  - Signing documents and verifying signatures
  - Conflict resolution between authors writing the same path
  - Prefix queries, byte limits and pagination
  - Ephemeral documents and expiry
  - Forgetting documents and closing the store

Usage:
  python examples/showcase_document_store.py
"""

from signed_store import (
    MemoryDocumentStore,
    Query,
    ValidationError,
    create_signed_document,
    document_signature_is_valid,
    generate_author_keypair,
)

NOW = 1_700_000_000_000_000

# ---------------------------------------------------------------------------
# 1. Identities and signed documents
# ---------------------------------------------------------------------------


def demo_identities() -> None:
    """Generate a keypair, sign a document, and show a forgery failing."""
    print("\n=== Identities ===\n")

    suzy = generate_author_keypair("suzy")
    print(f"suzy address: {suzy.address}")

    try:
        generate_author_keypair("SUZY")
    except ValidationError as e:
        print(f"rejected shortname: {e}")

    doc = create_signed_document(suzy, path="/wiki/kittens", content="meow", timestamp=NOW)
    print(f"signature valid: {document_signature_is_valid(doc)}")
    forged = doc.model_copy(update={"content": "woof"})
    print(f"forged signature valid: {document_signature_is_valid(forged)}")


# ---------------------------------------------------------------------------
# 2. MemoryDocumentStore
# ---------------------------------------------------------------------------


def demo_memory_store() -> None:
    """Demonstrate MemoryDocumentStore: latest vs all, limits, expiry, forget."""
    print("\n=== MemoryDocumentStore ===\n")

    suzy = generate_author_keypair("suzy")
    fred = generate_author_keypair("fred")
    store = MemoryDocumentStore("+gardening.demo", now=NOW)

    store.upsert(create_signed_document(suzy, path="/wiki/kittens", content="meow", timestamp=NOW - 20))
    store.upsert(create_signed_document(fred, path="/wiki/kittens", content="purr", timestamp=NOW - 10))
    store.upsert(create_signed_document(suzy, path="/wiki/puppies", content="woof", timestamp=NOW - 5))
    store.upsert(create_signed_document(fred, path="/blog/today", content="sunny", timestamp=NOW - 5))
    store.upsert(
        create_signed_document(suzy, path="/chat/hello", content="bye soon", timestamp=NOW - 5, delete_after=NOW - 1)
    )

    print(f"latest /wiki/kittens: {store.get_content('/wiki/kittens')!r}")
    print(f"all versions: {store.contents(Query(path='/wiki/kittens', history='all'))}")
    print(f"paths under /wiki/: {store.paths(Query(path_starts_with='/wiki/'))}")
    print(f"first 8 bytes: {store.contents(Query(history='latest', limit_bytes=8))}")

    page = store.read(Query(history="latest", limit=2))
    cursor = {"path": page[-1].path, "author": page[-1].author}
    print(f"page 1: {[d.path for d in page]}")
    print(f"page 2: {[d.path for d in store.read(Query(history='latest', limit=2, continue_after=cursor))]}")

    store.discard_expired()
    store.forget(Query(author=fred.address, history="all"))
    print(f"after forgetting fred: {store.paths()}")

    store.set_config("theme", "dark")
    print(f"config theme: {store.get_config('theme')}")

    store.close()
    print(f"closed: {store.is_closed()}")


if __name__ == "__main__":
    demo_identities()
    demo_memory_store()
