from dataclasses import dataclass


@dataclass(frozen=True)
class MergeConventions:
    """
    Reserved names shared by the generator, the merger and the persistence
    writer. A document only round-trips correctly if all three agree on them.
    """

    id_attribute: str = "id"
    fingerprint_attribute: str = "z"
    internal_prefix: str = "_"
    placeholder_tag: str = "util:placeholder"

    def is_bookkeeping(self, attribute_name: str) -> bool:
        # Tool-owned attributes never count as user-visible content.
        return attribute_name == self.fingerprint_attribute or attribute_name.startswith(
            self.internal_prefix
        )


DEFAULT_CONVENTIONS = MergeConventions()
