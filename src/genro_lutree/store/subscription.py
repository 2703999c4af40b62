# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Subscription support for NamedLuTree.

Insertions are reported to subscribers instead of being printed by the
tree itself. Two events exist:

    - insert ('ins'): a node was created
    - reject ('rej'): a batch insertion skipped a child because of an error

Callbacks are invoked with keyword arguments only, so subscribers can
accept ``**kwargs`` and pick what they need.

Example:
    >>> names = []
    >>> tree.subscribe('log', insert=lambda node, **kw: names.append(node.name))
    >>> handle = tree.insert_root_if_absent('A')
    >>> names
    ['A']
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from ..exceptions import LuTreeError
    from .node import LuTreeNode

SubscriberCallback = Callable[..., Any]


class SubscriptionMixin:
    """Mixin managing insert/reject subscribers.

    The host class must initialize ``_ins_subscribers`` and
    ``_rej_subscribers`` as empty dicts.
    """

    __slots__ = ()

    _ins_subscribers: dict[str, SubscriberCallback]
    _rej_subscribers: dict[str, SubscriberCallback]

    def subscribe(
        self,
        subscriber_id: str,
        insert: SubscriberCallback | None = None,
        reject: SubscriberCallback | None = None,
    ) -> None:
        """Register callbacks under subscriber_id.

        Registering again with the same id replaces the previous callback
        for each event given.

        Args:
            subscriber_id: Key used to unsubscribe later.
            insert: Called as ``insert(tree=, node=, evt='ins')``.
            reject: Called as ``reject(tree=, name=, parent=, error=, evt='rej')``.
        """
        if insert is not None:
            self._ins_subscribers[subscriber_id] = insert
        if reject is not None:
            self._rej_subscribers[subscriber_id] = reject

    def unsubscribe(
        self,
        subscriber_id: str,
        insert: bool = False,
        reject: bool = False,
    ) -> None:
        """Remove callbacks registered under subscriber_id.

        With no flag set, every event is unsubscribed. Unknown ids are
        ignored.
        """
        if not insert and not reject:
            insert = reject = True
        if insert:
            self._ins_subscribers.pop(subscriber_id, None)
        if reject:
            self._rej_subscribers.pop(subscriber_id, None)

    def _on_node_inserted(self, node: LuTreeNode) -> None:
        for callback in list(self._ins_subscribers.values()):
            callback(tree=self, node=node, evt='ins')

    def _on_child_rejected(self, name: str, parent: str, error: LuTreeError) -> None:
        for callback in list(self._rej_subscribers.values()):
            callback(tree=self, name=name, parent=parent, error=error, evt='rej')
