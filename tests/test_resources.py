import pytest

from distract.resources import Resource, ResourceError, ResourceManager, ResourceType


class FakeAsset:
    def __init__(self, source):
        self.source = source
        self.stopped = False

    def stop(self):
        self.stopped = True


class CountingLoaders:
    def __init__(self):
        self.calls = []

    def texture(self, path, rect):
        self.calls.append(("texture", path, rect))
        return FakeAsset((path, rect))

    def font(self, path):
        self.calls.append(("font", path))
        return FakeAsset(path)

    def buffer(self, path):
        self.calls.append(("buffer", path))
        return FakeAsset(path)

    def sound(self, buffer):
        self.calls.append(("sound", buffer))
        return FakeAsset(buffer)

    def music(self, path):
        self.calls.append(("music", path))
        return FakeAsset(path)

    def mapping(self):
        return {
            ResourceType.TEXTURE: self.texture,
            ResourceType.FONT: self.font,
            ResourceType.SOUND_BUFFER: self.buffer,
            ResourceType.SOUND: self.sound,
            ResourceType.MUSIC: self.music,
        }


@pytest.fixture
def loaders():
    return CountingLoaders()


@pytest.fixture
def manager(loaders):
    return ResourceManager(loaders.mapping())


def test_get_missing_is_none(manager):
    assert manager.get("missing.png") is None


def test_create_registers_resource(manager):
    resource = manager.create("a.png", ResourceType.TEXTURE, "asset")
    assert resource == Resource(ResourceType.TEXTURE, "a.png", "asset")
    assert manager.get("a.png") is resource
    assert "a.png" in manager


def test_create_without_path_raises(manager):
    with pytest.raises(ResourceError):
        manager.create(None, ResourceType.FONT)


def test_create_duplicate_raises(manager):
    manager.create("a.png", ResourceType.TEXTURE)
    with pytest.raises(ResourceError):
        manager.create("a.png", ResourceType.FONT)
    assert manager.get("a.png").type is ResourceType.TEXTURE


def test_texture_is_loaded_once(manager, loaders):
    first = manager.texture("hero.png", (0, 0, 4, 4))
    second = manager.texture("hero.png")
    assert first is second
    assert loaders.calls == [("texture", "hero.png", (0, 0, 4, 4))]
    assert manager.get("hero.png").type is ResourceType.TEXTURE


def test_font_is_cached(manager, loaders):
    font = manager.font("font.ttf")
    assert manager.font("font.ttf") is font
    assert loaders.calls == [("font", "font.ttf")]


def test_sound_registers_buffer_and_sound(manager, loaders):
    sound = manager.sound("boom.wav")
    buffer = manager.get("boom.wavsb")
    assert buffer.type is ResourceType.SOUND_BUFFER
    assert sound.source is buffer.asset
    assert manager.get("boom.wav").type is ResourceType.SOUND
    assert manager.sound("boom.wav") is sound
    assert [call[0] for call in loaders.calls] == ["buffer", "sound"]


def test_music_is_cached(manager, loaders):
    music = manager.music("theme.ogg")
    assert manager.music("theme.ogg") is music
    assert manager.get("theme.ogg").type is ResourceType.MUSIC
    assert len(loaders.calls) == 1


def test_failed_load_raises_and_leaves_nothing(loaders):
    def broken(path):
        raise OSError(path)

    manager = ResourceManager({**loaders.mapping(), ResourceType.FONT: broken})
    with pytest.raises(ResourceError):
        manager.font("nope.ttf")
    assert manager.get("nope.ttf") is None
    assert len(manager) == 0


def test_destroy_releases_asset(manager):
    music = manager.music("theme.ogg")
    manager.destroy("theme.ogg")
    assert music.stopped is True
    assert manager.get("theme.ogg") is None


def test_destroy_missing_is_ignored(manager):
    manager.texture("a.png")
    manager.destroy("b.png")
    assert len(manager) == 1


def test_reload_after_destroy(manager, loaders):
    first = manager.texture("a.png")
    manager.destroy("a.png")
    second = manager.texture("a.png")
    assert first is not second
    assert len(loaders.calls) == 2


def test_clear_releases_everything(manager):
    assets = [manager.texture(f"t{index}.png") for index in range(10)]
    manager.clear()
    assert len(manager) == 0
    assert all(asset.stopped for asset in assets)
    assert list(manager) == []


def test_iteration_yields_every_resource(manager):
    paths = {f"tex{index}.png" for index in range(120)}
    for path in paths:
        manager.texture(path)
    assert {resource.path for resource in manager} == paths
    assert len(manager) == len(paths)
    assert all(manager.get(path).path == path for path in paths)