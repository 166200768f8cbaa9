#!/usr/bin/env python3
"""
Пример использования библиотеки PySpr.

Этот скрипт демонстрирует основные возможности библиотеки
для чтения SPR файлов.
"""

import pyspr
import numpy as np
import io
import struct


def create_sample_spr_data():
    """Создает пример SPR данных для демонстрации."""
    # Два кадра: 4x2 и 2x2
    frame_a = bytes([0, 1, 2, 3, 3, 2, 1, 0])
    frame_b = bytes([5, 0, 0, 5])
    
    # Заголовок файла + 2 заголовка кадров = 18 байт
    offset_a = 2 + 8 * 2
    offset_b = offset_a + len(frame_a)
    
    header_data = (
        struct.pack("<H", 2) +                  # num_sprites 2
        struct.pack("<IHH", offset_a, 4, 2) +   # offset, width, height
        struct.pack("<IHH", offset_b, 2, 2)
    )
    
    return header_data + frame_a + frame_b


def create_sample_palette():
    """Создает палитру в оттенках серого (6 бит на компонент)."""
    levels = np.arange(256) % 64
    return np.repeat(levels[:, None], 3, axis=1).astype(np.uint8).tobytes()


def main():
    """Основная функция демонстрации."""
    print("🚀 Демонстрация библиотеки PySpr")
    print("=" * 50)
    
    print("📦 Создаем пример SPR данных...")
    spr_data = create_sample_spr_data()
    print(f"✅ Создан SPR файл размером {len(spr_data)} байт")
    
    print("\n📖 Загружаем данные через PySpr...")
    frames = pyspr.load(io.BytesIO(spr_data))
    
    print("✅ Данные успешно загружены!")
    print(f"📊 Количество кадров: {len(frames)}")
    
    print("\n📋 Кадры:")
    for i, frame in enumerate(frames):
        print(f"  {i}: {frame}")
        print(frame.as_2d())
    
    print("\n🎨 Отрисовка через палитру:")
    palette = pyspr.decode_palette(create_sample_palette(), bits=6)
    for i, frame in enumerate(frames):
        rgba = pyspr.render_frame(frame, palette)
        opaque = int((rgba[..., 3] == 255).sum())
        print(f"  Кадр {i}: {rgba.shape}, непрозрачных пикселей: {opaque}")
    
    print("\n🧪 Проверка поврежденного файла:")
    try:
        pyspr.decode_sprite(spr_data[:-1])
    except pyspr.OutOfBoundsFrameError as e:
        print(f"  ⚠️ {e}")
    
    print("\n✅ Все проверки пройдены успешно!")


if __name__ == "__main__":
    main()
