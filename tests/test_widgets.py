from fruitslots import constants
from fruitslots.constants import Rect
from fruitslots.widgets import Button, MessageBox


def test_button_starts_unclicked():
    b = Button(Rect(1, 2, 3, 4), "Start")
    assert b.was_clicked is False
    assert b.label == "Start"


def test_button_click_cycle():
    b = Button(Rect(1, 2, 3, 4), "Stop")
    b.register_click()
    assert b.was_clicked is True
    b.register_click()
    assert b.was_clicked is True
    b.unregister_click()
    assert b.was_clicked is False


def test_button_geometry_follows_position():
    pos = Rect(11, 22, 33, 44)
    b = Button(pos, "Go")
    assert (b.x, b.y, b.width, b.height) == (pos.x, pos.y, pos.width, pos.height)
    assert b.position == pos


def test_message_box_defaults():
    mb = MessageBox()
    assert mb.position == constants.DEFAULT_MESSAGE_BOX_POSITION
    assert mb.ok_button.position == constants.DEFAULT_OK_BUTTON_POSITION
    assert mb.ok_button.label == "Ok"
    assert mb.text == ""


def test_message_box_custom_positions_and_text():
    box = Rect(5, 6, 70, 80)
    btn = Rect(10, 20, 7, 8)
    mb = MessageBox(box, btn)
    mb.text = "YOU WON 100$!!!"
    assert mb.text == "YOU WON 100$!!!"
    assert (mb.x, mb.y, mb.width, mb.height) == (box.x, box.y, box.width, box.height)
    assert mb.ok_button.position == btn


def test_message_boxes_have_independent_buttons():
    a = MessageBox()
    b = MessageBox()
    a.ok_button.register_click()
    assert a.ok_button.was_clicked is True
    assert b.ok_button.was_clicked is False