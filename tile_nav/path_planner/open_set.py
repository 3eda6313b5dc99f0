#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
开放集：带索引的二叉最小堆

- 键为 (f, h, seq)：先比 f，再比 h，最后比首次入堆序号 seq
- 位置表 cell -> 堆下标，支持 O(log n) 的 decrease-key
- seq 在首次入堆时分配、更新优先级时保持不变，因此 f、h 都相同时
  先发现的格子先被展开，结果确定
"""

from typing import Dict, Generic, Hashable, List, Optional, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)

Priority = Tuple[float, float]  # (f, h)


class IndexedOpenSet(Generic[T]):
    """支持 decrease-key 的开放集"""

    def __init__(self) -> None:
        self._heap: List[Tuple[float, float, int, T]] = []
        self._pos: Dict[T, int] = {}
        self._seq: Dict[T, int] = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: T) -> bool:
        return item in self._pos

    def push(self, item: T, f: float, h: float) -> None:
        """插入新元素；已在集合中时等同于 update"""
        if item in self._pos:
            self.update(item, f, h)
            return

        seq = self._seq.get(item)
        if seq is None:
            seq = self._counter
            self._counter += 1
            self._seq[item] = seq

        self._heap.append((f, h, seq, item))
        self._pos[item] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def update(self, item: T, f: float, h: float) -> None:
        """
        修改已有元素的优先级（不改变 seq）

        Raises:
            KeyError: 元素不在开放集中
        """
        i = self._pos[item]
        old = self._heap[i]
        self._heap[i] = (f, h, old[2], item)
        if (f, h) < (old[0], old[1]):
            self._sift_up(i)
        else:
            self._sift_down(i)

    def pop(self) -> T:
        """
        弹出 (f, h, seq) 最小的元素

        Raises:
            IndexError: 开放集为空
        """
        if not self._heap:
            raise IndexError("pop from empty open set")

        top = self._heap[0][3]
        last = self._heap.pop()
        del self._pos[top]
        if self._heap:
            self._heap[0] = last
            self._pos[last[3]] = 0
            self._sift_down(0)
        return top

    def peek(self) -> Optional[T]:
        return self._heap[0][3] if self._heap else None

    def priority(self, item: T) -> Priority:
        f, h, _, _ = self._heap[self._pos[item]]
        return (f, h)

    # ------------------------------------------------------------------
    # 堆维护
    # ------------------------------------------------------------------
    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._pos[heap[i][3]] = i
        self._pos[heap[j][3]] = j

    def _less(self, i: int, j: int) -> bool:
        # 只比较前三项，避免比较 item 本身
        return self._heap[i][:3] < self._heap[j][:3]

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) >> 1
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        n = len(self._heap)
        while True:
            left = 2 * i + 1
            if left >= n:
                break
            smallest = left
            right = left + 1
            if right < n and self._less(right, left):
                smallest = right
            if not self._less(smallest, i):
                break
            self._swap(i, smallest)
            i = smallest
