#!/usr/bin/env python3
"""
memfs filesystem tests

Covers path resolution, the node tree, stat snapshots, every operation
of the synchronous layer, and the tree renderer.

Run with: python -m pytest memfs/tests -v
"""

import unittest


class FakeClock:
    """Deterministic clock for timestamp assertions."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_vfs(clock=None):
    from memfs.filesystem.vfs import VirtualFileSystem
    return VirtualFileSystem(clock=clock or FakeClock())


class TestPathResolver(unittest.TestCase):
    """Test path normalization and splitting."""

    def test_split(self):
        from memfs.filesystem.path_resolver import PathResolver

        self.assertEqual(PathResolver.split('/logs/app.log'), ('/logs', 'app.log'))
        self.assertEqual(PathResolver.split('/example.txt'), ('/', 'example.txt'))
        self.assertEqual(PathResolver.split('/'), ('/', None))

    def test_relative_and_redundant_separators(self):
        """A missing leading slash and repeated/trailing slashes are insignificant."""
        from memfs.filesystem.path_resolver import PathResolver

        self.assertEqual(PathResolver.split('a//b/'), ('/a', 'b'))
        self.assertEqual(PathResolver.normalize('logs'), '/logs')
        self.assertEqual(PathResolver.split(''), ('/', None))
        self.assertEqual(PathResolver.split('///'), ('/', None))

    def test_dot_segments(self):
        from memfs.filesystem.path_resolver import PathResolver

        self.assertEqual(PathResolver.normalize('/a/./b/../c'), '/a/c')
        self.assertEqual(PathResolver.normalize('/../..'), '/')

    def test_join_and_depth(self):
        from memfs.filesystem.path_resolver import PathResolver

        self.assertEqual(PathResolver.join('/', 'logs', 'app.log'), '/logs/app.log')
        self.assertEqual(PathResolver.join('/a', '/b'), '/b')
        self.assertEqual(PathResolver.basename('/'), '/')
        self.assertEqual(PathResolver.dirname('/logs/app.log'), '/logs')
        self.assertEqual(PathResolver.get_depth('/a/b/c'), 3)

    def test_is_within(self):
        from memfs.filesystem.path_resolver import PathResolver

        a = PathResolver.parse('/a')
        self.assertTrue(PathResolver.parse('/a/b').is_within(a))
        self.assertTrue(a.is_within(a))
        self.assertFalse(PathResolver.parse('/ab').is_within(a))


class TestNodes(unittest.TestCase):
    """Test the node tree primitives."""

    def test_directory_children(self):
        from memfs.filesystem.node import DirectoryNode, FileNode

        root = DirectoryNode(ino=1, created_at=0.0, modified_at=0.0)
        root.add_child('a.txt', FileNode(ino=2, created_at=0.0, modified_at=0.0), now=5.0)

        self.assertEqual(root.list_names(), ['a.txt'])
        self.assertEqual(root.modified_at, 5.0)
        with self.assertRaises(ValueError):
            root.add_child('a.txt', FileNode(ino=3, created_at=0.0, modified_at=0.0), now=6.0)
        with self.assertRaises(ValueError):
            root.add_child('x/y', FileNode(ino=4, created_at=0.0, modified_at=0.0), now=6.0)

    def test_touch_never_goes_backwards(self):
        from memfs.filesystem.node import FileNode

        node = FileNode(ino=2, created_at=10.0, modified_at=10.0)
        node.touch(5.0)
        self.assertEqual(node.modified_at, 10.0)

    def test_walk(self):
        from memfs.filesystem.node import DirectoryNode, FileNode

        root = DirectoryNode(ino=1, created_at=0.0, modified_at=0.0)
        sub = DirectoryNode(ino=2, created_at=0.0, modified_at=0.0)
        sub.add_child('f', FileNode(ino=3, created_at=0.0, modified_at=0.0), now=0.0)
        root.add_child('sub', sub, now=0.0)
        root.add_child('z', FileNode(ino=4, created_at=0.0, modified_at=0.0), now=0.0)

        self.assertEqual([p for p, _ in root.walk()], ['/sub', '/sub/f', '/z'])


class TestReadWrite(unittest.TestCase):
    """Test read_file, write_file and append_file."""

    def test_round_trip(self):
        from memfs.filesystem.options import ReadOptions

        vfs = make_vfs()
        vfs.write_file('/x.txt', 'hello')

        self.assertIsNotNone(vfs.resolve('/x.txt'))
        self.assertEqual(vfs.read_file('/x.txt'), b'hello')
        self.assertEqual(vfs.read_file('/x.txt', ReadOptions(encoding='utf-8')), 'hello')

        vfs.append_file('/x.txt', ' world')
        self.assertEqual(vfs.read_file('/x.txt', ReadOptions('utf-8')), 'hello world')

    def test_size_is_encoded_length(self):
        vfs = make_vfs()
        vfs.write_file('/u.txt', 'héllo')

        self.assertEqual(vfs.stat('/u.txt').st_size, len('héllo'.encode('utf-8')))

    def test_write_encodings(self):
        from memfs.filesystem.options import ReadOptions, WriteOptions

        vfs = make_vfs()
        vfs.write_file('/bin', '00ff10', WriteOptions(encoding='hex'))
        self.assertEqual(vfs.read_file('/bin'), b'\x00\xff\x10')
        self.assertEqual(vfs.read_file('/bin', ReadOptions('base64')), 'AP8Q')

        vfs.write_file('/raw', b'\x01\x02')
        self.assertEqual(vfs.read_file('/raw', ReadOptions('hex')), '0102')

    def test_unknown_encoding_rejected(self):
        from memfs.filesystem.options import ReadOptions, WriteOptions

        with self.assertRaises(ValueError):
            ReadOptions(encoding='no-such-codec')
        with self.assertRaises(ValueError):
            WriteOptions(encoding='no-such-codec')

    def test_read_errors(self):
        from memfs.exceptions import FileNotFoundError, IsADirectoryError

        vfs = make_vfs()
        vfs.make_directory('/d')

        with self.assertRaises(FileNotFoundError) as ctx:
            vfs.read_file('/missing.txt')
        self.assertEqual(ctx.exception.code, 'ENOENT')
        self.assertEqual(str(ctx.exception), "ENOENT: no such file or directory, open '/missing.txt'")

        with self.assertRaises(IsADirectoryError):
            vfs.read_file('/d')
        with self.assertRaises(IsADirectoryError):
            vfs.read_file('/')

    def test_write_errors(self):
        from memfs.exceptions import FileNotFoundError, IsADirectoryError

        vfs = make_vfs()
        vfs.make_directory('/d')
        vfs.write_file('/f.txt', 'x')

        with self.assertRaises(FileNotFoundError):
            vfs.write_file('/nope/x.txt', 'data')
        with self.assertRaises(FileNotFoundError):
            vfs.write_file('/f.txt/child', 'data')
        with self.assertRaises(IsADirectoryError):
            vfs.write_file('/d', 'data')
        with self.assertRaises(IsADirectoryError):
            vfs.write_file('/', 'data')

    def test_overwrite_keeps_creation_time(self):
        clock = FakeClock()
        vfs = make_vfs(clock)

        vfs.write_file('/x.txt', 'one')
        first = vfs.stat('/x.txt')

        clock.advance(10)
        vfs.write_file('/x.txt', 'two')
        second = vfs.stat('/x.txt')

        self.assertEqual(second.st_birthtime, first.st_birthtime)
        self.assertEqual(second.st_ino, first.st_ino)
        self.assertEqual(second.st_mtime, first.st_mtime + 10)
        self.assertEqual(vfs.stat('/').st_mtime, second.st_mtime)

    def test_append_updates_file_and_parent(self):
        clock = FakeClock()
        vfs = make_vfs(clock)
        vfs.make_directory('/d')
        vfs.write_file('/d/log', 'a')

        clock.advance(3)
        vfs.append_file('/d/log', 'b')

        self.assertEqual(vfs.stat('/d/log').st_mtime, 1003.0)
        self.assertEqual(vfs.stat('/d').st_mtime, 1003.0)
        self.assertEqual(vfs.stat('/d/log').st_birthtime, 1000.0)

    def test_append_degrades_to_write(self):
        from memfs.exceptions import FileNotFoundError, IsADirectoryError

        vfs = make_vfs()
        vfs.append_file('/new.txt', 'created')
        self.assertEqual(vfs.read_file('/new.txt'), b'created')

        vfs.make_directory('/d')
        with self.assertRaises(IsADirectoryError):
            vfs.append_file('/d', 'x')
        with self.assertRaises(FileNotFoundError):
            vfs.append_file('/missing/new.txt', 'x')

    def test_dot_segments_normalized_before_lookup(self):
        """'..' is resolved lexically, so a missing directory it cancels is never looked up."""
        vfs = make_vfs()
        vfs.write_file('/a/../b', 'x')

        self.assertEqual(vfs.list_directory('/'), ['b'])
        self.assertEqual(vfs.read_file('/./b'), b'x')
        self.assertFalse(vfs.exists('/a'))

    def test_resolve_parent_directory(self):
        vfs = make_vfs()
        vfs.make_directory('/d')
        vfs.write_file('/f', 'x')

        self.assertIs(vfs.resolve_parent_directory('/d/new.txt'), vfs.resolve('/d'))
        self.assertIs(vfs.resolve_parent_directory('/d'), vfs.root)
        self.assertIsNone(vfs.resolve_parent_directory('/f/child'))
        self.assertIsNone(vfs.resolve_parent_directory('/missing/child'))

    def test_bytes_like_data(self):
        vfs = make_vfs()
        vfs.write_file('/b', bytearray(b'ab'))
        vfs.append_file('/b', memoryview(b'cd'))
        self.assertEqual(vfs.read_file('/b'), b'abcd')

        with self.assertRaises(TypeError):
            vfs.write_file('/c', 42)


class TestDirectories(unittest.TestCase):
    """Test make_directory, list_directory and remove_directory."""

    def test_make_directory_twice(self):
        from memfs.exceptions import FileExistsError

        vfs = make_vfs()
        vfs.make_directory('/d')

        with self.assertRaises(FileExistsError) as ctx:
            vfs.make_directory('/d')
        self.assertEqual(ctx.exception.code, 'EEXIST')
        self.assertEqual(ctx.exception.syscall, 'mkdir')

    def test_make_directory_over_file(self):
        from memfs.exceptions import FileExistsError

        vfs = make_vfs()
        vfs.write_file('/f', 'x')
        with self.assertRaises(FileExistsError):
            vfs.make_directory('/f')
        with self.assertRaises(FileExistsError):
            vfs.make_directory('/')

    def test_make_directory_missing_parent(self):
        from memfs.exceptions import FileNotFoundError

        vfs = make_vfs()
        with self.assertRaises(FileNotFoundError):
            vfs.make_directory('/a/b')
        self.assertFalse(vfs.exists('/a'))

    def test_make_directory_recursive(self):
        from memfs.filesystem.options import MakeDirectoryOptions

        vfs = make_vfs()
        vfs.make_directory('/a/b/c', MakeDirectoryOptions(recursive=True))

        for path in ('/a', '/a/b', '/a/b/c'):
            self.assertTrue(vfs.stat(path).is_directory())
        self.assertEqual(vfs.list_directory('/a'), ['b'])
        self.assertEqual(vfs.list_directory('/a/b'), ['c'])
        self.assertEqual(vfs.list_directory('/a/b/c'), [])

    def test_make_directory_recursive_through_existing(self):
        from memfs.filesystem.options import MakeDirectoryOptions

        vfs = make_vfs()
        vfs.make_directory('/a')
        vfs.write_file('/a/keep.txt', 'x')
        vfs.make_directory('/a/b/c', MakeDirectoryOptions(recursive=True))

        self.assertEqual(sorted(vfs.list_directory('/a')), ['b', 'keep.txt'])
        self.assertEqual(vfs.read_file('/a/keep.txt'), b'x')

    def test_make_directory_recursive_stops_at_file(self):
        from memfs.exceptions import FileExistsError
        from memfs.filesystem.options import MakeDirectoryOptions

        vfs = make_vfs()
        vfs.make_directory('/d')
        vfs.write_file('/d/f', 'x')

        with self.assertRaises(FileExistsError) as ctx:
            vfs.make_directory('/d/f/g/h', MakeDirectoryOptions(recursive=True))
        self.assertEqual(ctx.exception.path, '/d/f')
        self.assertTrue(vfs.stat('/d/f').is_file())
        self.assertEqual(vfs.list_directory('/d'), ['f'])

    def test_make_directory_recursive_existing_leaf(self):
        from memfs.exceptions import FileExistsError
        from memfs.filesystem.options import MakeDirectoryOptions

        vfs = make_vfs()
        vfs.make_directory('/d')
        with self.assertRaises(FileExistsError):
            vfs.make_directory('/d', MakeDirectoryOptions(recursive=True))

    def test_make_directory_updates_parent(self):
        clock = FakeClock()
        vfs = make_vfs(clock)
        clock.advance(7)
        vfs.make_directory('/d')

        self.assertEqual(vfs.stat('/').st_mtime, 1007.0)
        self.assertEqual(vfs.stat('/d').st_birthtime, 1007.0)

    def test_list_directory_errors(self):
        from memfs.exceptions import FileNotFoundError, NotADirectoryError

        vfs = make_vfs()
        vfs.write_file('/f.txt', 'x')

        with self.assertRaises(NotADirectoryError) as ctx:
            vfs.list_directory('/f.txt')
        self.assertEqual(ctx.exception.code, 'ENOTDIR')
        self.assertEqual(ctx.exception.syscall, 'scandir')
        with self.assertRaises(FileNotFoundError):
            vfs.list_directory('/missing')

    def test_list_directory_reflects_current_children(self):
        vfs = make_vfs()
        vfs.write_file('/a', '1')
        vfs.write_file('/b', '2')
        vfs.make_directory('/c')
        vfs.remove_file('/a')

        self.assertEqual(set(vfs.list_directory('/')), {'b', 'c'})

    def test_remove_directory_not_empty(self):
        from memfs.exceptions import DirectoryNotEmptyError

        vfs = make_vfs()
        vfs.make_directory('/d')
        vfs.write_file('/d/f', 'x')

        with self.assertRaises(DirectoryNotEmptyError) as ctx:
            vfs.remove_directory('/d')
        self.assertEqual(ctx.exception.code, 'ENOTEMPTY')
        self.assertTrue(vfs.exists('/d/f'))

    def test_remove_directory_recursive(self):
        from memfs.filesystem.options import MakeDirectoryOptions, RemoveDirectoryOptions

        clock = FakeClock()
        vfs = make_vfs(clock)
        vfs.make_directory('/d/sub/deep', MakeDirectoryOptions(recursive=True))
        vfs.write_file('/d/f1', 'x')
        vfs.write_file('/d/sub/f2', 'y')
        vfs.write_file('/d/sub/deep/f3', 'z')
        vfs.write_file('/keep', 'k')

        clock.advance(4)
        vfs.remove_directory('/d', RemoveDirectoryOptions(recursive=True))

        for path in ('/d', '/d/f1', '/d/sub', '/d/sub/f2', '/d/sub/deep', '/d/sub/deep/f3'):
            self.assertFalse(vfs.exists(path), path)
        self.assertEqual(vfs.list_directory('/'), ['keep'])
        self.assertEqual(vfs.stat('/').st_mtime, 1004.0)

    def test_remove_empty_directory(self):
        vfs = make_vfs()
        vfs.make_directory('/d')
        vfs.remove_directory('/d')
        self.assertFalse(vfs.exists('/d'))

    def test_remove_directory_errors(self):
        from memfs.exceptions import FileNotFoundError, NotADirectoryError

        vfs = make_vfs()
        vfs.write_file('/f', 'x')

        with self.assertRaises(NotADirectoryError):
            vfs.remove_directory('/f')
        with self.assertRaises(FileNotFoundError):
            vfs.remove_directory('/missing')
        with self.assertRaises(FileNotFoundError):
            vfs.remove_directory('/')
        self.assertTrue(vfs.exists('/'))


class TestRemoveFile(unittest.TestCase):
    """Test remove_file."""

    def test_remove_file(self):
        clock = FakeClock()
        vfs = make_vfs(clock)
        vfs.write_file('/f', 'x')
        clock.advance(2)
        vfs.remove_file('/f')

        self.assertFalse(vfs.exists('/f'))
        self.assertEqual(vfs.stat('/').st_mtime, 1002.0)

    def test_remove_missing_file(self):
        from memfs.exceptions import FileNotFoundError

        vfs = make_vfs()
        with self.assertRaises(FileNotFoundError) as ctx:
            vfs.remove_file('/missing.txt')
        self.assertEqual(ctx.exception.syscall, 'unlink')

    def test_remove_directory_as_file(self):
        from memfs.exceptions import IsADirectoryError

        vfs = make_vfs()
        vfs.make_directory('/d')
        with self.assertRaises(IsADirectoryError):
            vfs.remove_file('/d')
        self.assertTrue(vfs.exists('/d'))


class TestRename(unittest.TestCase):
    """Test rename."""

    def test_rename_file(self):
        clock = FakeClock()
        vfs = make_vfs(clock)
        vfs.make_directory('/src')
        vfs.make_directory('/dst')
        vfs.write_file('/src/a.txt', 'data')
        before = vfs.stat('/src/a.txt')

        clock.advance(5)
        vfs.rename('/src/a.txt', '/dst/b.txt')

        self.assertFalse(vfs.exists('/src/a.txt'))
        self.assertEqual(vfs.read_file('/dst/b.txt'), b'data')
        after = vfs.stat('/dst/b.txt')
        self.assertEqual(after, before)
        self.assertEqual(vfs.stat('/src').st_mtime, 1005.0)
        self.assertEqual(vfs.stat('/dst').st_mtime, 1005.0)

    def test_rename_directory_moves_subtree(self):
        from memfs.filesystem.options import MakeDirectoryOptions

        vfs = make_vfs()
        vfs.make_directory('/a/b', MakeDirectoryOptions(recursive=True))
        vfs.write_file('/a/b/f', 'x')
        vfs.rename('/a', '/z')

        self.assertFalse(vfs.exists('/a'))
        self.assertEqual(vfs.read_file('/z/b/f'), b'x')

    def test_rename_onto_existing(self):
        from memfs.exceptions import FileExistsError

        vfs = make_vfs()
        vfs.write_file('/a', 'A')
        vfs.write_file('/b', 'B')
        stat_a, stat_b = vfs.stat('/a'), vfs.stat('/b')

        with self.assertRaises(FileExistsError) as ctx:
            vfs.rename('/a', '/b')
        self.assertEqual(str(ctx.exception), "EEXIST: file already exists, rename '/a' -> '/b'")

        self.assertEqual(vfs.read_file('/a'), b'A')
        self.assertEqual(vfs.read_file('/b'), b'B')
        self.assertEqual(vfs.stat('/a'), stat_a)
        self.assertEqual(vfs.stat('/b'), stat_b)

    def test_rename_onto_itself(self):
        from memfs.exceptions import FileExistsError

        vfs = make_vfs()
        vfs.write_file('/a', 'A')
        with self.assertRaises(FileExistsError):
            vfs.rename('/a', '/a')

    def test_rename_missing(self):
        from memfs.exceptions import FileNotFoundError

        vfs = make_vfs()
        vfs.write_file('/a', 'A')
        with self.assertRaises(FileNotFoundError):
            vfs.rename('/missing', '/b')
        with self.assertRaises(FileNotFoundError):
            vfs.rename('/a', '/no/such/dir/b')
        self.assertTrue(vfs.exists('/a'))

    def test_rename_into_own_subtree(self):
        from memfs.exceptions import FileNotFoundError
        from memfs.filesystem.options import MakeDirectoryOptions

        vfs = make_vfs()
        vfs.make_directory('/a/b', MakeDirectoryOptions(recursive=True))

        with self.assertRaises(FileNotFoundError):
            vfs.rename('/a', '/a/b/c')
        with self.assertRaises(FileNotFoundError):
            vfs.rename('/a', '/a/c')

        self.assertEqual(vfs.list_directory('/'), ['a'])
        self.assertEqual(vfs.list_directory('/a'), ['b'])

    def test_rename_root(self):
        from memfs.exceptions import FileExistsError, FileNotFoundError

        vfs = make_vfs()
        vfs.write_file('/a', 'A')
        with self.assertRaises(FileNotFoundError):
            vfs.rename('/', '/x')
        with self.assertRaises(FileExistsError):
            vfs.rename('/a', '/')


class TestStatAndExists(unittest.TestCase):
    """Test stat snapshots and exists."""

    def test_file_stat(self):
        import stat as stat_mod

        clock = FakeClock()
        vfs = make_vfs(clock)
        vfs.write_file('/f', 'x' * 1000)
        clock.advance(1)
        vfs.append_file('/f', 'y')
        st = vfs.stat('/f')

        self.assertTrue(st.is_file())
        self.assertFalse(st.is_directory())
        for predicate in (st.is_symbolic_link, st.is_block_device, st.is_character_device,
                          st.is_fifo, st.is_socket):
            self.assertFalse(predicate())
        self.assertEqual(st.st_size, 1001)
        self.assertEqual(st.st_blocks, 2)
        self.assertEqual(st.st_mode, 33188)
        self.assertTrue(stat_mod.S_ISREG(st.st_mode))
        self.assertEqual(st.st_atime, st.st_mtime)
        self.assertEqual(st.st_mtime, 1001.0)
        self.assertEqual(st.st_ctime, 1000.0)
        self.assertEqual(st.st_birthtime, 1000.0)
        self.assertEqual(st.mtime_ms, 1001000.0)

    def test_directory_stat(self):
        vfs = make_vfs()
        vfs.make_directory('/d')
        vfs.write_file('/d/f', 'abc')
        st = vfs.stat('/d')

        self.assertTrue(st.is_directory())
        self.assertEqual(st.st_size, 0)
        self.assertEqual(st.st_mode, 16877)
        self.assertEqual(st.st_nlink, 1)
        self.assertEqual(st.st_blksize, 4096)

    def test_stat_is_a_snapshot(self):
        vfs = make_vfs()
        vfs.write_file('/f', 'abc')
        st = vfs.stat('/f')
        vfs.append_file('/f', 'def')

        self.assertEqual(st.st_size, 3)
        self.assertEqual(vfs.stat('/f').st_size, 6)

    def test_stat_missing(self):
        from memfs.exceptions import FileNotFoundError

        vfs = make_vfs()
        with self.assertRaises(FileNotFoundError) as ctx:
            vfs.stat('/missing')
        self.assertEqual(ctx.exception.syscall, 'stat')

    def test_inode_numbers_are_unique(self):
        vfs = make_vfs()
        vfs.write_file('/a', '1')
        vfs.write_file('/b', '2')

        self.assertEqual(vfs.stat('/').st_ino, 1)
        self.assertNotEqual(vfs.stat('/a').st_ino, vfs.stat('/b').st_ino)

    def test_exists_does_not_mutate(self):
        clock = FakeClock()
        vfs = make_vfs(clock)
        vfs.write_file('/f', 'x')
        before = (vfs.stat('/').st_mtime, vfs.stat('/f'))

        clock.advance(50)
        for _ in range(3):
            self.assertTrue(vfs.exists('/f'))
            self.assertTrue(vfs.exists('/'))
            self.assertFalse(vfs.exists('/nope'))
            self.assertFalse(vfs.exists('/f/child'))

        self.assertEqual((vfs.stat('/').st_mtime, vfs.stat('/f')), before)

    def test_stats(self):
        vfs = make_vfs()
        vfs.make_directory('/d')
        vfs.write_file('/d/f', 'abc')

        self.assertEqual(vfs.get_stats(), {'files': 1, 'directories': 2, 'total_size': 3})


class TestSampleTreeAndRenderer(unittest.TestCase):
    """Test sample seeding and the text renderer."""

    def test_seed_sample_tree(self):
        from memfs.filesystem.options import ReadOptions

        vfs = make_vfs()
        vfs.seed_sample_tree()

        self.assertEqual(vfs.list_directory('/'), ['example.txt', 'config.json', 'images', 'logs'])
        self.assertEqual(vfs.list_directory('/images'), ['photo.png'])
        self.assertIn('Application started', vfs.read_file('/logs/app.log', ReadOptions('utf-8')))

    def test_render_tree(self):
        from memfs.filesystem.renderer import render_tree

        vfs = make_vfs()
        vfs.write_file('/a.txt', 'hello')
        vfs.make_directory('/logs')
        vfs.write_file('/logs/app.log', 'xy')

        self.assertEqual(
            render_tree(vfs),
            '/\n'
            '├── a.txt (5 B)\n'
            '└── logs/\n'
            '    └── app.log (2 B)'
        )
        self.assertEqual(render_tree(vfs, '/logs', show_size=False), '/logs\n└── app.log')
        self.assertEqual(render_tree(vfs, '/a.txt'), 'a.txt (5 B)')

    def test_tree_deeper_than_recursion_limit(self):
        """Stats, rendering and removal handle trees of any depth."""
        import sys
        from memfs.filesystem.options import MakeDirectoryOptions, RemoveDirectoryOptions
        from memfs.filesystem.renderer import render_tree

        depth = sys.getrecursionlimit() + 200
        deepest = '/' + '/'.join(['d'] * depth)

        vfs = make_vfs()
        vfs.make_directory(deepest, MakeDirectoryOptions(recursive=True))
        vfs.write_file(deepest + '/leaf.txt', 'x')

        self.assertEqual(vfs.get_stats(), {'files': 1, 'directories': depth + 1, 'total_size': 1})

        lines = render_tree(vfs, show_size=False).split('\n')
        self.assertEqual(len(lines), depth + 2)
        self.assertEqual(lines[1], '└── d/')
        self.assertEqual(lines[-1], '    ' * depth + '└── leaf.txt')

        vfs.remove_directory('/d', RemoveDirectoryOptions(recursive=True))
        self.assertEqual(vfs.list_directory('/'), [])


if __name__ == '__main__':
    unittest.main()
