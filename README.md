# linkwork

A small toolkit of singly linked lists and the pointer algorithms that
go with them. It also has a sliding-window helper for finding the length of
the longest substring without repeated characters.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Linked lists

`linkwork.nodes` provides a bare `Node`, a `build` helper that links an
iterable of values into a chain of nodes, and a `LinkedList` wrapper.

A `Node` has a `value` and a `next` link. Nodes compare by identity, and
iterating over a node yields its value and the values of every node after it.
Because of this, iterating over a chain that contains a cycle never ends.

```python
from linkwork.nodes import LinkedList, build

items = LinkedList([2, 3])
items.insert_at_head(1)
items.append(4)
items.insert_at(1, 5)
items.update_at(2, 6)
print(items)        # 1->5->6->3->4->NULL
items.delete_head()
items.delete_tail()
items.delete_at(0)
items.delete_alternate()
print(list(items), len(items))   # [6] 1

head = build([1, 2, 3])   # a chain of Node objects
print(list(head))         # [1, 2, 3]
print(build([]))          # None
```

Positions are zero-based. `insert_at` accepts positions from 0 up to the
list's length. An out-of-range position, and deleting from an empty list,
raise `IndexError`. `delete_alternate` keeps the nodes at positions 0, 2, 4
and so on and drops the rest. The list's head node is available as
`LinkedList.head`.

## Algorithms on node chains

`linkwork.algorithms` works on head nodes, with `None` standing for an empty
chain. The functions that restructure a chain do it in place and return the
new head.

```python
from linkwork.nodes import build
from linkwork import algorithms as alg

head = build([1, 2, 3, 4, 5, 6])
head = alg.reverse_in_groups(head, 2)
print(list(head))                           # [2, 1, 4, 3, 6, 5]

merged = alg.merge_k_sorted([build([3, 9]), build([4, 8]), build([1, 7])])
print(list(merged))                         # [1, 3, 4, 7, 8, 9]

print(alg.middle(build([1, 2, 3])).value)   # 2
print(alg.lists_equal(build([1, 2]), build([1, 2])))  # True
```

The full set:

- `lists_equal(head1, head2)`: same values in the same order.
- `length(head)`: number of nodes.
- `advance(head, k)`: the node `k` steps on; `IndexError` for a negative `k`
  or one that goes past the end.
- `intersection(head1, head2)`: the first node shared by both chains, or `None`.
- `remove_from_end(head, k)`: unlinks the `k`-th node from the end (1-based).
- `merge_sorted(head1, head2)`: splices two sorted chains; ties take from `head1` first.
- `merge_k_sorted(heads)`: merges chains pairwise from the front; `None` for no chains.
- `middle(head)`: the middle node, the second of the two for even lengths.
- `has_cycle(head)` and `remove_cycle(head)`: the latter raises `ValueError`
  when there is no cycle.
- `remove_duplicates(head)`: drops nodes equal to the node before them.
- `reversed_values(head)`: the values from last to first, as a list.
- `reverse(head)` and `reverse_recursive(head)`: reverse the whole chain.
- `reverse_in_groups(head, k)`: reverses each run of `k` nodes, a shorter
  last run included; `ValueError` when `k` is less than 1.

## Longest substring without repeats

```python
from linkwork.substring import longest_unique_substring

longest_unique_substring("abcabcbb")   # 3
```

From the command line, one line is printed for each text given, and
`abcabcbb` is used when none is:

```
linkwork-substring abcabcbb pwwkew
```

## What it does not do

This is a library of in-memory structures and algorithms. Apart from the
substring command there is no command-line interface, and nothing is read
from or saved to files.