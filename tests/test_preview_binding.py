import pytest
from PIL import Image

from formstate import PhotoFile, InstancePath, ItemPath, SetPhoto, AddInstance, RemoveInstance, reduce
from preview import PhotoSlot, PreviewBinding, ThumbnailAllocator, is_image


def _png(tmp_path, name="photo.png", size=(1200, 800)):
    p = tmp_path / name
    Image.new("RGB", size, (200, 30, 30)).save(p)
    return PhotoFile.from_path(p)


def test_is_image_uses_mime_type():
    assert is_image(PhotoFile.from_path("door.jpg"))
    assert is_image(PhotoFile("x", "x", "image/heic"))
    assert not is_image(PhotoFile.from_path("notes.pdf"))
    assert not is_image(PhotoFile.from_path("noext"))
    assert not is_image(None)


def test_slot_releases_before_allocating_on_replace(allocator):
    slot = PhotoSlot(allocator)
    a, b = PhotoFile.from_path("a.jpg"), PhotoFile.from_path("b.jpg")
    h1 = slot.bind(a)
    assert slot.bind(a) is h1  # same file object, same handle
    h2 = slot.bind(b)
    assert h1.released and not h2.released
    assert allocator.released == [h1]
    slot.bind(None)
    assert slot.handle is None
    slot.release()  # nothing outstanding
    assert len(allocator.allocated) == len(allocator.released) == 2


def test_selection_sequence_never_leaks(allocator):
    slot = PhotoSlot(allocator)
    seq = [PhotoFile.from_path(f"{i}.jpg") if i % 3 else None for i in range(20)]
    for photo in seq:
        slot.bind(photo)
        assert allocator.live <= 1
    slot.release()
    assert len(allocator.allocated) == len(allocator.released)
    assert len(set(map(id, allocator.released))) == len(allocator.released)


def test_binding_follows_tree(tree, allocator):
    previews = PreviewBinding(allocator)
    tree = reduce(tree, AddInstance(ItemPath(0, 0)))
    first = tree.sections[0].items[0].instances[0].id
    second = tree.sections[0].items[0].instances[1].id
    tree = reduce(tree, SetPhoto(InstancePath(0, 0, 0), PhotoFile.from_path("a.jpg")))
    tree = reduce(tree, SetPhoto(InstancePath(0, 0, 1), PhotoFile.from_path("b.jpg")))
    previews.sync(tree)
    assert set(previews.live_handles()) == {first, second}

    # removing the first row shifts indices; the second row keeps its preview
    kept = previews.get(second)
    tree = reduce(tree, RemoveInstance(InstancePath(0, 0, 0)))
    previews.sync(tree)
    assert previews.get(first) is None
    assert previews.get(second) is kept
    assert allocator.live == 1

    previews.close()
    assert allocator.live == 0


def test_detached_slot_stays_released_until_photo_changes(tree, allocator):
    with PreviewBinding(allocator) as previews:
        tree = reduce(tree, SetPhoto(InstancePath(0, 0, 0), PhotoFile.from_path("a.jpg")))
        iid = tree.sections[0].items[0].instances[0].id
        previews.sync(tree)
        previews.detach(iid)
        assert previews.get(iid) is None and allocator.live == 0

        # unrelated edit elsewhere does not bring the preview back
        tree = reduce(tree, SetPhoto(InstancePath(1, 0, 0), PhotoFile.from_path("b.jpg")))
        previews.sync(tree)
        assert previews.get(iid) is None
        assert allocator.live == 1

        # a new photo on the detached row does
        tree = reduce(tree, SetPhoto(InstancePath(0, 0, 0), PhotoFile.from_path("c.jpg")))
        previews.sync(tree)
        assert previews.get(iid).photo.name == "c.jpg"
    assert allocator.live == 0


def test_observe_reallocates_detached_slot(tree, allocator):
    previews = PreviewBinding(allocator)
    tree = reduce(tree, SetPhoto(InstancePath(0, 0, 0), PhotoFile.from_path("a.jpg")))
    iid = tree.sections[0].items[0].instances[0].id
    previews.sync(tree)
    previews.detach(iid)
    previews.observe(iid)
    previews.sync(tree)
    assert previews.get(iid) is not None
    previews.close()
    assert len(allocator.allocated) == len(allocator.released) == 2


def test_thumbnail_allocator_with_pillow(tmp_path):
    alloc = ThumbnailAllocator(max_size=(100, 100))
    handle = alloc.allocate(_png(tmp_path))
    assert handle.key.startswith("preview://")
    assert max(handle.image.size) == 100
    assert alloc.live == 1
    alloc.release(handle)
    assert handle.released and handle.image is None and alloc.live == 0
    with pytest.raises(RuntimeError):
        alloc.release(handle)


def test_thumbnail_allocator_rejects_undecodable(tmp_path):
    bad = tmp_path / "fake.png"
    bad.write_bytes(b"not really a png")
    with pytest.raises(OSError):
        ThumbnailAllocator().allocate(PhotoFile.from_path(bad))
