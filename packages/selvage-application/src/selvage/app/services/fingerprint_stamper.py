from typing import Iterable

from lxml import etree

from selvage.spec import FingerprintStrategyProtocol, MergeConventions


class FingerprintStamper:
    """
    Writes the fingerprint attribute onto generated elements. A stamp
    certifies "this element is exactly what the generator produced", which
    is what later licenses the merger to replace it.
    """

    def __init__(
        self,
        strategy: FingerprintStrategyProtocol,
        conventions: MergeConventions,
    ):
        self.strategy = strategy
        self.conventions = conventions

    def stamp(self, elements: Iterable[etree._Element]) -> int:
        count = 0
        for element in elements:
            element.set(
                self.conventions.fingerprint_attribute, self.strategy.compute(element)
            )
            count += 1
        return count

    def stamp_tree(self, root: etree._Element, overwrite: bool = False) -> int:
        """
        Stamps every identified element below and including `root`.

        Existing stamps are kept unless `overwrite` is set, so a generator
        may ship its own markers (e.g. `z="user-managed"`).
        """
        fp_attr = self.conventions.fingerprint_attribute
        targets = [
            el
            for el in root.iter(etree.Element)
            if el.get(self.conventions.id_attribute)
            and (overwrite or el.get(fp_attr) is None)
        ]
        return self.stamp(targets)
